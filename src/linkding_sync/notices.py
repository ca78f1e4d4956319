"""Transient user notices, logged and kept in a short history."""

from collections import deque
from datetime import datetime, timezone

import structlog

from linkding_sync.models import Notice

logger = structlog.get_logger(__name__)


class NoticeBoard:
    def __init__(self, history: int = 50):
        self._notices: deque[Notice] = deque(maxlen=history)

    def notify(self, message: str) -> None:
        logger.info("notice", message=message)
        self._notices.append(Notice(message=message, created_at=datetime.now(timezone.utc)))

    def recent(self) -> list[Notice]:
        return list(self._notices)
