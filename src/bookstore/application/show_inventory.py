"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from bookstore.application.dto import CatalogLineDTO
from bookstore.domain.model.inventory import Inventory


class ShowInventoryHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self) -> list[CatalogLineDTO]:
        return [
            CatalogLineDTO(
                kind=summary.kind.value,
                identifier=summary.identifier,
                title=summary.title,
                year=summary.year,
                price=str(summary.price),
                stock=summary.stock,
            )
            for summary in self._inventory.list_all()
        ]
