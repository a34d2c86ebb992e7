"""Notification sink that forwards every event to several sinks."""

from __future__ import annotations

from bookstore.domain.model.events import CatalogEvent
from bookstore.domain.notification_sink import NotificationSink


class FanOutNotificationSink(NotificationSink):

    def __init__(self, sinks: list[NotificationSink]) -> None:
        self._sinks = list(sinks)

    def notify(self, event: CatalogEvent) -> None:
        for sink in self._sinks:
            sink.notify(event)
