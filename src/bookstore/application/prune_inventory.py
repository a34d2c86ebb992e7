"""Application service: Prune Inventory use case."""

from __future__ import annotations

from bookstore.domain.exceptions import ValidationError
from bookstore.domain.model.events import ItemRemoved
from bookstore.domain.model.inventory import Inventory
from bookstore.domain.notification_sink import NotificationSink


class PruneInventoryHandler:

    def __init__(self, inventory: Inventory, sink: NotificationSink) -> None:
        self._inventory = inventory
        self._sink = sink

    def handle(self, current_year: int, threshold_years: int) -> list[ItemRemoved]:
        """Remove items older than *threshold_years* and announce each one."""
        if threshold_years < 0:
            raise ValidationError("Age threshold cannot be negative")

        removed = self._inventory.remove_outdated(current_year, threshold_years)
        for event in removed:
            self._sink.notify(event)
        return removed
