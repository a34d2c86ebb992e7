"""Purchase outcome returned by ``CatalogItem.fulfill_purchase``."""

from __future__ import annotations

from dataclasses import dataclass

from bookstore.domain.model.events import FulfillmentEvent, PurchaseError


@dataclass(frozen=True)
class PurchaseResult:
    """Either a fulfillment event or the reason the purchase was refused.

    Exactly one of ``event`` and ``error`` is set.  Use the factories
    rather than the constructor.
    """

    item_id: str
    event: FulfillmentEvent | None = None
    error: PurchaseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @staticmethod
    def success(event: FulfillmentEvent) -> PurchaseResult:
        return PurchaseResult(item_id=event.item_id, event=event)

    @staticmethod
    def failure(item_id: str, error: PurchaseError) -> PurchaseResult:
        return PurchaseResult(item_id=item_id, error=error)
