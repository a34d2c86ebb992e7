"""Domain events emitted by purchases and pruning.

Events are plain immutable values.  The domain never prints or sends
them; callers hand them to a ``NotificationSink``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from bookstore.domain.model.value_objects import Money


class PurchaseError(Enum):
    """Why a purchase was refused."""

    INVALID_QUANTITY = "INVALID_QUANTITY"
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    NOT_FOR_SALE = "NOT_FOR_SALE"

    @property
    def message(self) -> str:
        return _ERROR_MESSAGES[self]

    @property
    def recoverable(self) -> bool:
        """False when retrying the same call can never succeed."""
        return self is not PurchaseError.NOT_FOR_SALE


_ERROR_MESSAGES = {
    PurchaseError.INVALID_QUANTITY: "Cannot purchase, quantity must have positive value.",
    PurchaseError.INSUFFICIENT_STOCK: "Cannot purchase, not enough stock.",
    PurchaseError.NOT_FOR_SALE: "Cannot purchase, this book is for display only.",
}


@dataclass(frozen=True)
class ShipmentFulfilled:
    item_id: str
    title: str
    quantity: int
    address: str
    amount: Money


@dataclass(frozen=True)
class DigitalDeliveryFulfilled:
    item_id: str
    title: str
    file_format: str
    email: str
    amount: Money


@dataclass(frozen=True)
class PurchaseRejected:
    item_id: str
    title: str
    reason: PurchaseError


@dataclass(frozen=True)
class ItemRemoved:
    """An item was pruned from the inventory for being too old."""

    item_id: str
    title: str
    year: int


FulfillmentEvent = ShipmentFulfilled | DigitalDeliveryFulfilled
CatalogEvent = ShipmentFulfilled | DigitalDeliveryFulfilled | PurchaseRejected | ItemRemoved
