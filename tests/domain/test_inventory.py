"""Unit tests for the Inventory aggregate."""

from bookstore.domain.model.catalog_item import DisplayOnlyBook, ItemKind, PhysicalBook
from bookstore.domain.model.events import ItemRemoved
from bookstore.domain.model.inventory import Inventory
from bookstore.domain.model.value_objects import Money
from tests.fakes import sample_inventory


def _showcase(identifier: str, year: int) -> DisplayOnlyBook:
    return DisplayOnlyBook(identifier, f"Book {identifier}", year, Money.of(1))


class TestAddItem:

    def test_add_appends_in_order(self):
        inv = Inventory()
        inv.add_item(_showcase("A", 2000))
        inv.add_item(_showcase("B", 2001))
        assert [i.identifier for i in inv] == ["A", "B"]

    def test_add_none_is_ignored(self):
        inv = Inventory()
        inv.add_item(None)
        assert len(inv) == 0

    def test_duplicate_identifiers_accepted(self):
        inv = Inventory()
        inv.add_item(_showcase("A", 2000))
        inv.add_item(_showcase("A", 2010))
        assert len(inv) == 2


class TestFindByIdentifier:

    def test_found(self):
        inv = sample_inventory()
        assert inv.find_by_identifier("E002").title == "Mastering STL"

    def test_not_found(self):
        assert sample_inventory().find_by_identifier("X999") is None

    def test_returns_first_duplicate(self):
        first = _showcase("A", 2000)
        inv = Inventory([first, _showcase("A", 2010)])
        assert inv.find_by_identifier("A") is first

    def test_returns_live_item(self):
        inv = sample_inventory()
        inv.find_by_identifier("P001").fulfill_purchase(2, "a@b.c", "addr")
        assert inv.find_by_identifier("P001").stock == 3


class TestRemoveOutdated:

    def test_removes_only_items_older_than_threshold(self):
        inv = sample_inventory()
        removed = inv.remove_outdated(2025, 40)
        assert removed == [ItemRemoved(item_id="S003", title="Ancient Codex", year=1970)]
        assert [i.identifier for i in inv] == ["P001", "E002"]

    def test_item_exactly_at_threshold_is_kept(self):
        inv = Inventory([_showcase("A", 1985)])
        assert inv.remove_outdated(2025, 40) == []
        assert len(inv) == 1

    def test_item_one_year_past_threshold_is_removed(self):
        inv = Inventory([_showcase("A", 1984)])
        assert len(inv.remove_outdated(2025, 40)) == 1
        assert len(inv) == 0

    def test_consecutive_removals_skip_nothing(self):
        inv = Inventory([
            _showcase("A", 1900),
            _showcase("B", 1901),
            _showcase("C", 2020),
            _showcase("D", 1902),
            _showcase("E", 1903),
            _showcase("F", 2021),
        ])
        removed = inv.remove_outdated(2025, 10)
        assert [e.item_id for e in removed] == ["A", "B", "D", "E"]
        assert [i.identifier for i in inv] == ["C", "F"]

    def test_remove_from_empty_inventory(self):
        assert Inventory().remove_outdated(2025, 0) == []


class TestListAll:

    def test_lists_in_insertion_order(self):
        lines = sample_inventory().list_all()
        assert [line.identifier for line in lines] == ["P001", "E002", "S003"]
        assert [line.kind for line in lines] == [
            ItemKind.PHYSICAL, ItemKind.DIGITAL, ItemKind.DISPLAY_ONLY,
        ]

    def test_stock_only_on_physical(self):
        lines = sample_inventory().list_all()
        assert [line.stock for line in lines] == [5, None, None]

    def test_order_preserved_after_purchase(self):
        inv = sample_inventory()
        inv.find_by_identifier("P001").fulfill_purchase(1, "a@b.c", "addr")
        inv.add_item(PhysicalBook("P004", "Late Arrival", 2024, Money.of(10), stock=1))
        assert [line.identifier for line in inv.list_all()] == ["P001", "E002", "S003", "P004"]
