from dataclasses import dataclass
from typing import Any, Mapping


def _text(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class Bookmark:
    """A bookmark record as returned by ``/api/bookmarks/``.

    Every attribute is optional: the API response is trusted only as far as
    reading the keys that happen to be present.
    """

    url: str | None = None
    title: str | None = None
    website_title: str | None = None
    description: str | None = None
    tag_names: tuple[str, ...] = ()

    @classmethod
    def from_api(cls, record: Mapping[str, Any]) -> "Bookmark":
        tags = record.get("tag_names")
        if not isinstance(tags, (list, tuple)):
            tags = ()
        return cls(
            url=_text(record.get("url")),
            title=_text(record.get("title")),
            website_title=_text(record.get("website_title")),
            description=_text(record.get("description")),
            tag_names=tuple(str(tag) for tag in tags),
        )
