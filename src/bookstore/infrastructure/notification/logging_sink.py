"""Notification sink backed by the standard ``logging`` module."""

from __future__ import annotations

import logging
from dataclasses import asdict

from bookstore.domain.model.events import CatalogEvent, PurchaseRejected
from bookstore.domain.notification_sink import NotificationSink

logger = logging.getLogger(__name__)


class LoggingNotificationSink(NotificationSink):
    """Logs each event with its fields attached as ``extra`` data.

    Rejections are logged at WARNING, everything else at INFO.
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def notify(self, event: CatalogEvent) -> None:
        name = type(event).__name__
        fields = asdict(event)
        level = logging.WARNING if isinstance(event, PurchaseRejected) else logging.INFO
        self._log.log(level, f"{name} item={event.item_id}", extra={"event": name, "fields": fields})
