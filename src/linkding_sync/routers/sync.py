import structlog
from fastapi import APIRouter, Depends

from linkding_sync.app_state import AppState, get_app_state
from linkding_sync.models import SyncReport

router = APIRouter(prefix="/api/v1")

logger = structlog.get_logger(__name__)


@router.post("/sync")
async def sync_now(state: AppState = Depends(get_app_state)) -> SyncReport:
    report = await state.sync_engine.sync_bookmarks(state.settings_service.settings)
    logger.info("manual_sync_finished", ok=report.ok, appended=report.appended)
    return report
