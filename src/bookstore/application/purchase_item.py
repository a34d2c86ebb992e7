"""Application service: Purchase Item use case.

Looks the item up, asks it to fulfill the purchase, and reports the
outcome to the notification sink.  A refused purchase is returned to
the caller, not raised.
"""

from __future__ import annotations

from bookstore.domain.exceptions import EntityNotFoundError
from bookstore.domain.model.events import PurchaseRejected
from bookstore.domain.model.inventory import Inventory
from bookstore.domain.model.purchase import PurchaseResult
from bookstore.domain.notification_sink import NotificationSink


class PurchaseItemHandler:

    def __init__(self, inventory: Inventory, sink: NotificationSink) -> None:
        self._inventory = inventory
        self._sink = sink

    def handle(
        self,
        identifier: str,
        quantity: int,
        email: str,
        address: str,
    ) -> PurchaseResult:
        item = self._inventory.find_by_identifier(identifier)
        if item is None:
            raise EntityNotFoundError(f"Item '{identifier}' not found")

        result = item.fulfill_purchase(quantity, email, address)

        if result.ok:
            self._sink.notify(result.event)
        else:
            self._sink.notify(
                PurchaseRejected(
                    item_id=item.identifier,
                    title=item.title,
                    reason=result.error,
                )
            )
        return result
