"""Application service: Add Item use case."""

from __future__ import annotations

from bookstore.application.dto import CatalogItemSpec
from bookstore.domain.exceptions import ValidationError
from bookstore.domain.model.catalog_item import (
    CatalogItem,
    DigitalBook,
    DisplayOnlyBook,
    ItemKind,
    PhysicalBook,
)
from bookstore.domain.model.inventory import Inventory
from bookstore.domain.model.value_objects import Money


class AddItemHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, spec: CatalogItemSpec) -> CatalogItem:
        """Build the variant described by *spec* and add it to the inventory."""
        item = self._build(spec)
        self._inventory.add_item(item)
        return item

    @staticmethod
    def _build(spec: CatalogItemSpec) -> CatalogItem:
        try:
            kind = ItemKind(spec.kind)
        except ValueError:
            raise ValidationError(f"Unknown item kind: '{spec.kind}'")

        price = Money.of(spec.price)

        if kind is ItemKind.PHYSICAL:
            if spec.stock is None:
                raise ValidationError("A physical book needs a stock level")
            return PhysicalBook(spec.identifier, spec.title, spec.year, price, spec.stock)
        if kind is ItemKind.DIGITAL:
            if not spec.file_format:
                raise ValidationError("A digital book needs a file format")
            return DigitalBook(spec.identifier, spec.title, spec.year, price, spec.file_format)
        return DisplayOnlyBook(spec.identifier, spec.title, spec.year, price)
