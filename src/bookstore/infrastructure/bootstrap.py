"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  Defaults for the demo
scenario live here too.
"""

from __future__ import annotations

from bookstore.application.add_item import AddItemHandler
from bookstore.application.dto import CatalogItemSpec
from bookstore.domain.model.inventory import Inventory
from bookstore.domain.notification_sink import NotificationSink
from bookstore.infrastructure.notification.console_sink import ConsoleNotificationSink
from bookstore.infrastructure.notification.fan_out_sink import FanOutNotificationSink
from bookstore.infrastructure.notification.logging_sink import LoggingNotificationSink

DEFAULT_CURRENT_YEAR = 2025
DEFAULT_AGE_THRESHOLD = 40
DEMO_EMAIL = "reader@example.com"
DEMO_ADDRESS = "Maadi Street"

DEMO_CATALOG = [
    CatalogItemSpec(
        kind="PhysicalBook", identifier="P001", title="C++ Foundations",
        year=2010, price="2500", stock=5,
    ),
    CatalogItemSpec(
        kind="DigitalBook", identifier="E002", title="Mastering STL",
        year=2022, price="5000", file_format="PDF",
    ),
    CatalogItemSpec(
        kind="DisplayOnlyBook", identifier="S003", title="Ancient Codex",
        year=1970, price="750",
    ),
]


def notification_sink(verbose: bool = False) -> NotificationSink:
    if verbose:
        return FanOutNotificationSink([ConsoleNotificationSink(), LoggingNotificationSink()])
    return ConsoleNotificationSink()


def demo_inventory() -> Inventory:
    inventory = Inventory()
    handler = AddItemHandler(inventory)
    for spec in DEMO_CATALOG:
        handler.handle(spec)
    return inventory
