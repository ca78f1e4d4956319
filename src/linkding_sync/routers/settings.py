from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from linkding_sync.app_state import AppState, get_app_state
from linkding_sync.exceptions import UnknownSettingError
from linkding_sync.models import NoticeResponse, UpdateSettingRequest

router = APIRouter(prefix="/api/v1")


@router.get("/settings")
async def get_settings(state: AppState = Depends(get_app_state)) -> dict[str, Any]:
    return state.settings_service.settings.to_storage()


@router.put("/settings/{key}")
async def put_setting(
    key: str,
    body: UpdateSettingRequest,
    state: AppState = Depends(get_app_state),
) -> dict[str, Any]:
    try:
        settings = state.settings_service.update_field(key, body.value)
    except UnknownSettingError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    return settings.to_storage()


@router.get("/notices")
async def get_notices(
    state: AppState = Depends(get_app_state),
) -> list[NoticeResponse]:
    return [
        NoticeResponse(message=n.message, created_at=n.created_at)
        for n in state.notices.recent()
    ]
