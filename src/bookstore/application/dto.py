"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogItemSpec:
    """Input: the fields needed to build one catalog item.

    ``kind`` is an ``ItemKind`` value such as ``"PhysicalBook"``.
    ``stock`` is required for physical books, ``file_format`` for digital.
    """

    kind: str
    identifier: str
    title: str
    year: int
    price: str
    stock: int | None = None
    file_format: str | None = None


@dataclass(frozen=True)
class CatalogLineDTO:
    """Output: a single inventory line as displayed to the user."""

    kind: str
    identifier: str
    title: str
    year: int
    price: str  # formatted, e.g. "2500.00 LE"
    stock: int | None = None
