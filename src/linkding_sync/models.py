from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass
class SyncReport:
    ok: bool
    fetched: int = 0
    appended: int = 0
    error: str | None = None


@dataclass
class Notice:
    message: str
    created_at: datetime


class UpdateSettingRequest(BaseModel):
    # Raw text as typed into the settings form; numeric fields are parsed server-side
    value: str


class NoticeResponse(BaseModel):
    message: str
    created_at: datetime
