"""The persisted sync settings and their defaults."""

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field


class SyncSettings(BaseModel):
    """User-editable settings, stored under their camelCase keys.

    Missing keys fall back to the defaults below field by field; unknown keys
    are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    instance_url: str = Field(default="http://192.168.50.203:9090", alias="instanceURL")
    api_key: str = Field(default="", alias="apiKey")
    destination_path: str = Field(default="notes/linkdingnotes", alias="destinationPath")
    update_interval_minutes: int = Field(default=30, ge=0, alias="updateIntervalMinutes")
    search_query: str = Field(default="", alias="searchQuery")
    fetch_limit: int = Field(default=100, gt=0, alias="fetchLimit")
    fetch_offset: int = Field(default=0, ge=0, alias="fetchOffset")

    @classmethod
    def merged(cls, stored: Mapping[str, Any]) -> "SyncSettings":
        return cls.model_validate(dict(stored))

    def to_storage(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


# storage key -> attribute name
SETTING_KEYS: dict[str, str] = {
    field.alias: name for name, field in SyncSettings.model_fields.items()
}

# Labels used in notices when a numeric edit is rejected
NUMERIC_FIELDS: dict[str, str] = {
    "updateIntervalMinutes": "Update Interval",
    "fetchLimit": "Results Limit",
    "fetchOffset": "Offset",
}


def default_for(key: str) -> Any:
    return SyncSettings.model_fields[SETTING_KEYS[key]].default
