from typing import NamedTuple

from fastapi import Request

from linkding_sync.notices import NoticeBoard
from linkding_sync.ports import Scheduler
from linkding_sync.settings.service import SettingsService
from linkding_sync.sync.engine import SyncEngine


class AppState(NamedTuple):
    settings_service: SettingsService
    sync_engine: SyncEngine
    scheduler: Scheduler
    notices: NoticeBoard


def get_app_state(request: Request) -> AppState:
    return request.app.state.app_state
