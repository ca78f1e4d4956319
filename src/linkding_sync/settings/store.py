from pathlib import Path
from typing import Any

import structlog
import yaml

logger = structlog.get_logger(__name__)


class YamlKeyValueStore:
    """Opaque key-value blob persisted as a YAML mapping."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def load_data(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        content = self._path.read_text(encoding="utf-8")
        if not content.strip():
            return {}
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            logger.warning("settings_file_unreadable", path=str(self._path), error=e)
            return {}
        if not isinstance(data, dict):
            return {}
        return data

    def save_data(self, data: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            yaml.safe_dump(dict(data), default_flow_style=False, sort_keys=False),
            encoding="utf-8",
        )
