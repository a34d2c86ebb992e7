"""Integration tests for the PurchaseItem use case."""

import pytest

from bookstore.application.purchase_item import PurchaseItemHandler
from bookstore.domain.exceptions import EntityNotFoundError
from bookstore.domain.model.events import (
    DigitalDeliveryFulfilled,
    PurchaseError,
    PurchaseRejected,
    ShipmentFulfilled,
)
from tests.fakes import RecordingNotificationSink, sample_inventory


def _setup():
    inventory = sample_inventory()
    sink = RecordingNotificationSink()
    return inventory, sink, PurchaseItemHandler(inventory, sink)


class TestPurchaseHappyPath:

    def test_physical_purchase_ships_and_deducts(self):
        inventory, sink, handler = _setup()
        result = handler.handle("P001", 2, "a@b.c", "Maadi Street")

        assert result.ok
        assert inventory.find_by_identifier("P001").stock == 3
        assert len(sink.events) == 1
        assert isinstance(sink.events[0], ShipmentFulfilled)
        assert sink.events[0].address == "Maadi Street"

    def test_digital_purchase_delivers_by_email(self):
        _, sink, handler = _setup()
        result = handler.handle("E002", 1, "a@b.c", "no address needed")

        assert result.ok
        assert sink.events == [result.event]
        assert isinstance(result.event, DigitalDeliveryFulfilled)
        assert result.event.email == "a@b.c"
        assert result.event.file_format == "PDF"


class TestPurchaseRejections:

    def test_display_only_rejected_and_reported(self):
        _, sink, handler = _setup()
        result = handler.handle("S003", 1, "a@b.c", "addr")

        assert result.error is PurchaseError.NOT_FOR_SALE
        assert sink.events == [
            PurchaseRejected(
                item_id="S003",
                title="Ancient Codex",
                reason=PurchaseError.NOT_FOR_SALE,
            )
        ]

    def test_over_stock_rejected_without_side_effects(self):
        inventory, sink, handler = _setup()
        result = handler.handle("P001", 10, "a@b.c", "addr")

        assert result.error is PurchaseError.INSUFFICIENT_STOCK
        assert inventory.find_by_identifier("P001").stock == 5
        assert sink.events[0].reason is PurchaseError.INSUFFICIENT_STOCK

    def test_failure_does_not_affect_other_items(self):
        inventory, _, handler = _setup()
        before = inventory.list_all()
        handler.handle("S003", 1, "a@b.c", "addr")
        handler.handle("P001", 0, "a@b.c", "addr")
        assert inventory.list_all() == before

    def test_unknown_identifier_raises(self):
        _, sink, handler = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            handler.handle("X999", 1, "a@b.c", "addr")
        assert sink.events == []
