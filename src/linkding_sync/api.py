import logging
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from linkding_sync.app_state import AppState
from linkding_sync.config import AppConfig
from linkding_sync.linkding.client import HttpBookmarkFetcher
from linkding_sync.notices import NoticeBoard
from linkding_sync.routers import settings as settings_router
from linkding_sync.routers import sync as sync_router
from linkding_sync.scheduler import PeriodicSync
from linkding_sync.settings.service import SettingsService
from linkding_sync.settings.store import YamlKeyValueStore
from linkding_sync.sync.engine import SyncEngine
from linkding_sync.sync.vault import VaultFileStore

logger = structlog.get_logger(__name__)


def build_app_state(config: AppConfig) -> AppState:
    notices = NoticeBoard(config.notice_history)
    settings_service = SettingsService(YamlKeyValueStore(config.settings_path), notices)
    sync_engine = SyncEngine(
        HttpBookmarkFetcher(), VaultFileStore(config.vault_dir), notices
    )

    async def scheduled_sync():
        # settings are read when the timer fires, not when it was scheduled
        return await sync_engine.sync_bookmarks(settings_service.settings)

    scheduler = PeriodicSync(scheduled_sync)
    settings_service.subscribe(scheduler.on_settings_changed)
    return AppState(
        settings_service=settings_service,
        sync_engine=sync_engine,
        scheduler=scheduler,
        notices=notices,
    )


def create_app(config: AppConfig | None = None) -> FastAPI:
    config = config or AppConfig()
    logging.basicConfig(level=config.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        state = build_app_state(config)
        settings = state.settings_service.load()
        state.scheduler.start(settings.update_interval_minutes)
        app.state.app_state = state
        app.state.config = config
        yield
        state.scheduler.stop()
        await state.scheduler.wait_idle()
        state.settings_service.save()
        logger.info("shutdown_complete")

    app = FastAPI(title="Linkding Sync API", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(settings_router.router)
    app.include_router(sync_router.router)
    return app


app = create_app()


if __name__ == "__main__":
    config = AppConfig()
    uvicorn.run(app, host=config.host, port=config.port)
