"""Configuration store: load, edit and persist the sync settings."""

import re
from typing import Any, Callable

import structlog
from pydantic import ValidationError

from linkding_sync.exceptions import UnknownSettingError
from linkding_sync.ports import KeyValueStore, Notifier
from linkding_sync.settings.models import (
    NUMERIC_FIELDS,
    SETTING_KEYS,
    SyncSettings,
    default_for,
)

logger = structlog.get_logger(__name__)

SettingsListener = Callable[[str, SyncSettings], None]

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_leading_int(value: str) -> int | None:
    """Parse the integer prefix of a text input, e.g. ``"12 min"`` -> 12.

    Returns:
        The parsed integer, or None when the input does not start with digits.
    """
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))


class SettingsService:
    def __init__(self, store: KeyValueStore, notifier: Notifier):
        self._store = store
        self._notifier = notifier
        self._settings: SyncSettings | None = None
        self._listeners: list[SettingsListener] = []

    @property
    def settings(self) -> SyncSettings:
        if self._settings is None:
            raise RuntimeError("settings have not been loaded")
        return self._settings

    def load(self) -> SyncSettings:
        """Read stored settings and merge them over the defaults.

        Stored values that fail validation are dropped so that field falls
        back to its default; the remaining stored fields still apply.
        """
        stored = dict(self._store.load_data())
        while True:
            try:
                self._settings = SyncSettings.merged(stored)
                break
            except ValidationError as e:
                invalid = {str(err["loc"][0]) for err in e.errors() if err["loc"]}
                logger.warning("stored_settings_invalid", keys=sorted(invalid))
                if not invalid & stored.keys():
                    raise
                for key in invalid:
                    stored.pop(key, None)
        logger.info("settings_loaded", keys=sorted(stored))
        return self._settings

    def save(self) -> None:
        self._store.save_data(self.settings.to_storage())

    def subscribe(self, listener: SettingsListener) -> None:
        self._listeners.append(listener)

    def update_field(self, key: str, raw_value: str) -> SyncSettings:
        """Apply one edit from the settings form and persist immediately.

        Numeric fields take the integer prefix of ``raw_value``. Input that
        is not a number, or is zero or negative, resets the field to its
        default and posts a notice naming the fallback.

        Raises:
            UnknownSettingError: If ``key`` is not a settings key.
        """
        if key not in SETTING_KEYS:
            raise UnknownSettingError(f"Unknown setting '{key}'")

        value: Any = raw_value
        if key in NUMERIC_FIELDS:
            value = parse_leading_int(raw_value)
            if not value or value < 0:
                value = default_for(key)
                self._notifier.notify(
                    f"{NUMERIC_FIELDS[key]} ({key}) must be a positive number. "
                    f"Defaulting to {value}"
                )

        setattr(self.settings, SETTING_KEYS[key], value)
        self.save()
        logger.info("setting_updated", key=key)

        for listener in self._listeners:
            listener(key, self.settings)
        return self.settings
