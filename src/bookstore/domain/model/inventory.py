"""Inventory aggregate — the ordered collection of catalog items.

The inventory owns every item it holds.  Items leave it only through
age-based pruning, and there is no index by identifier: lookups scan the
list in insertion order.
"""

from __future__ import annotations

from collections.abc import Iterator

from bookstore.domain.model.catalog_item import CatalogItem, CatalogItemSummary
from bookstore.domain.model.events import ItemRemoved


class Inventory:
    """Aggregate root for the catalog.

    Invariants:
    - iteration and ``list_all()`` follow insertion order
    - pruning keeps the relative order of the surviving items
    """

    def __init__(self, items: list[CatalogItem] | None = None) -> None:
        self._items: list[CatalogItem] = []
        for item in items or []:
            self.add_item(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[CatalogItem]:
        return iter(self._items)

    def add_item(self, item: CatalogItem | None) -> None:
        """Append an item.  ``None`` is ignored.

        Duplicate identifiers are accepted; ``find_by_identifier`` will
        only ever return the first of them.
        """
        if item is None:
            return
        self._items.append(item)

    def find_by_identifier(self, identifier: str) -> CatalogItem | None:
        for item in self._items:
            if item.identifier == identifier:
                return item
        return None

    def remove_outdated(self, current_year: int, threshold_years: int) -> list[ItemRemoved]:
        """Drop every item strictly older than ``threshold_years``.

        Returns one ``ItemRemoved`` per dropped item, in insertion order.
        An item whose age equals the threshold is kept.
        """
        removed: list[ItemRemoved] = []
        survivors: list[CatalogItem] = []
        for item in self._items:
            if item.age(current_year) > threshold_years:
                removed.append(
                    ItemRemoved(item_id=item.identifier, title=item.title, year=item.year)
                )
            else:
                survivors.append(item)
        self._items = survivors
        return removed

    def list_all(self) -> list[CatalogItemSummary]:
        return [item.summarize() for item in self._items]
