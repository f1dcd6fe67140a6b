import pytest

from product_table.errors import UnknownField
from product_table.models import ProductRecord
from product_table.services.seed import seed_demo
from product_table.services.sorting import SortToggle, sort_records
from product_table.services.table import ProductTable


def demo_records():
    table = ProductTable()
    seed_demo(table)
    return table.store.all()


def make_record(record_id, **overrides):
    data = {
        "id": record_id,
        "product": "Echo Dot",
        "brand": "Amazon",
        "category": "Smart Home Devices",
        "price": "$49.99",
        "in_stock": "Yes",
        "rating": "4.0",
    }
    data.update(overrides)
    return ProductRecord(**data)


def ids(records):
    return [record.id for record in records]


def test_numeric_sort_uses_numbers_not_text():
    records = demo_records()
    # $1400.00 would sort before $345.49 as text
    assert ids(sort_records(records, "price")) == [4, 3, 1, 2]
    assert ids(sort_records(records, "price", descending=True)) == [2, 1, 3, 4]


def test_text_sort_ignores_case():
    records = demo_records()
    assert ids(sort_records(records, "product")) == [4, 2, 1, 3]
    assert ids(sort_records(records, "brand")) == [1, 4, 2, 3]


def test_text_sort_descending():
    records = demo_records()
    assert ids(sort_records(records, "brand", descending=True)) == [3, 2, 4, 1]

    table = ProductTable()
    seed_demo(table)
    view = table.sort("product", descending=True)
    assert [row.id for row in view.items] == [3, 1, 2, 4]
    assert view.descending is True
    # the next header activation flips back to ascending
    assert [row.id for row in table.sort("product").items] == [4, 2, 1, 3]


def test_text_sort_follows_collation_not_code_points():
    records = [
        make_record(1, product="Zebra"),
        make_record(2, product="\u00c9clair"),
        make_record(3, product="apple"),
    ]
    assert [r.product for r in sort_records(records, "product")] == ["apple", "\u00c9clair", "Zebra"]


def test_sort_is_stable_for_equal_keys():
    records = demo_records()
    assert ids(sort_records(records, "rating")) == [2, 1, 3, 4]
    assert ids(sort_records(records, "category")) == [4, 2, 1, 3]


def test_same_flag_twice_is_idempotent_and_toggle_reverses():
    records = demo_records()
    first = sort_records(records, "id")
    assert sort_records(first, "id") == first
    assert sort_records(first, "id", descending=True) == list(reversed(first))


def test_sort_does_not_touch_its_input():
    records = demo_records()
    sort_records(records, "id", descending=True)
    assert ids(records) == [1, 2, 3, 4]


def test_unknown_field():
    with pytest.raises(UnknownField):
        sort_records(demo_records(), "colour")


def test_toggle_remembers_each_column():
    toggle = SortToggle()
    assert toggle.next_direction("price") is False
    # asking does not change the remembered direction
    assert toggle.next_direction("price") is False
    toggle.record("price", False)
    assert toggle.next_direction("price") is True
    toggle.record("price", True)
    assert toggle.next_direction("id") is False
    assert toggle.next_direction("price") is False
    with pytest.raises(UnknownField):
        toggle.next_direction("colour")


def test_table_sort_reorders_store():
    table = ProductTable()
    seed_demo(table)
    view = table.sort("price")
    assert [row.id for row in view.items] == [4, 3, 1, 2]
    assert ids(table.store.all()) == [4, 3, 1, 2]
    assert view.sort_field == "price" and view.descending is False

    view = table.sort("price")
    assert [row.id for row in view.items] == [2, 1, 3, 4]
    assert view.descending is True
    assert len(table.store) == 4
