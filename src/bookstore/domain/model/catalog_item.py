"""Catalog items — the book records held by an Inventory.

Three variants share one interface: whether they can be bought, and what
happens when they are.  Each variant names itself through ``kind`` so
nobody has to probe types with ``isinstance`` to display it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum
from typing import ClassVar

from bookstore.domain.exceptions import ValidationError
from bookstore.domain.model.events import (
    DigitalDeliveryFulfilled,
    PurchaseError,
    ShipmentFulfilled,
)
from bookstore.domain.model.purchase import PurchaseResult
from bookstore.domain.model.value_objects import Money


class ItemKind(Enum):
    PHYSICAL = "PhysicalBook"
    DIGITAL = "DigitalBook"
    DISPLAY_ONLY = "DisplayOnlyBook"


@dataclass(frozen=True)
class CatalogItemSummary:
    """Read-only snapshot of an item for listings.

    ``stock`` is only set for physical books.
    """

    kind: ItemKind
    identifier: str
    title: str
    year: int
    price: Money
    stock: int | None = None


@dataclass
class CatalogItem(ABC):
    """Abstract base for every book variant.

    Invariants:
    - ``identifier`` is non-empty and cannot be reassigned
    - ``price`` is a ``Money`` and therefore never negative
    """

    kind: ClassVar[ItemKind]

    identifier: str
    title: str
    year: int
    price: Money

    def __post_init__(self) -> None:
        if not isinstance(self.identifier, str) or not self.identifier.strip():
            raise ValidationError("Item identifier is required")
        if not isinstance(self.price, Money):
            raise ValidationError(
                f"Item price must be Money, got {type(self.price).__name__}"
            )
        if not isinstance(self.year, int) or isinstance(self.year, bool):
            raise ValidationError(
                f"Publication year must be an integer, got {self.year!r}"
            )

    def __setattr__(self, name: str, value: object) -> None:
        if name == "identifier" and "identifier" in self.__dict__:
            raise AttributeError("identifier is immutable")
        super().__setattr__(name, value)

    def age(self, current_year: int) -> int:
        return current_year - self.year

    def summarize(self) -> CatalogItemSummary:
        return CatalogItemSummary(
            kind=self.kind,
            identifier=self.identifier,
            title=self.title,
            year=self.year,
            price=self.price,
        )

    @abstractmethod
    def is_purchasable(self) -> bool:
        """Whether this item can ever be sold."""

    def fulfill_purchase(
        self,
        quantity: int,
        destination_email: str,
        destination_address: str,
    ) -> PurchaseResult:
        """Attempt a purchase and return its outcome.

        A refused purchase never changes the item.
        """
        if not self.is_purchasable():
            return PurchaseResult.failure(self.identifier, PurchaseError.NOT_FOR_SALE)
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity <= 0:
            return PurchaseResult.failure(self.identifier, PurchaseError.INVALID_QUANTITY)
        return self._fulfill(quantity, destination_email, destination_address)

    @abstractmethod
    def _fulfill(
        self,
        quantity: int,
        destination_email: str,
        destination_address: str,
    ) -> PurchaseResult:
        """Carry out a validated purchase of a purchasable item."""


@dataclass
class PhysicalBook(CatalogItem):
    """A printed book with a finite stock, shipped to a postal address."""

    kind: ClassVar[ItemKind] = ItemKind.PHYSICAL

    stock: int

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.stock, int) or isinstance(self.stock, bool):
            raise ValidationError(f"Stock must be an integer, got {self.stock!r}")
        if self.stock < 0:
            raise ValidationError(f"Stock cannot be negative, got {self.stock}")

    def is_purchasable(self) -> bool:
        return True

    def has_stock_for(self, quantity: int) -> bool:
        return self.stock >= quantity

    def summarize(self) -> CatalogItemSummary:
        return replace(super().summarize(), stock=self.stock)

    def _fulfill(
        self,
        quantity: int,
        destination_email: str,
        destination_address: str,
    ) -> PurchaseResult:
        if not self.has_stock_for(quantity):
            return PurchaseResult.failure(self.identifier, PurchaseError.INSUFFICIENT_STOCK)
        amount = self.price * quantity
        self.stock -= quantity
        return PurchaseResult.success(
            ShipmentFulfilled(
                item_id=self.identifier,
                title=self.title,
                quantity=quantity,
                address=destination_address,
                amount=amount,
            )
        )


@dataclass
class DigitalBook(CatalogItem):
    """A downloadable book.  Copies are inexhaustible.

    Each purchase is one delivery to one email address; ``quantity`` is
    validated but does not multiply the delivery or the charge.
    """

    kind: ClassVar[ItemKind] = ItemKind.DIGITAL

    file_format: str

    def is_purchasable(self) -> bool:
        return True

    def _fulfill(
        self,
        quantity: int,
        destination_email: str,
        destination_address: str,
    ) -> PurchaseResult:
        return PurchaseResult.success(
            DigitalDeliveryFulfilled(
                item_id=self.identifier,
                title=self.title,
                file_format=self.file_format,
                email=destination_email,
                amount=self.price,
            )
        )


@dataclass
class DisplayOnlyBook(CatalogItem):
    """A showcase item.  Listed, never sold."""

    kind: ClassVar[ItemKind] = ItemKind.DISPLAY_ONLY

    def is_purchasable(self) -> bool:
        return False

    def _fulfill(
        self,
        quantity: int,
        destination_email: str,
        destination_address: str,
    ) -> PurchaseResult:
        return PurchaseResult.failure(self.identifier, PurchaseError.NOT_FOR_SALE)
