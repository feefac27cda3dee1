import datetime
from decimal import Decimal

import pytest

from invoice_exports.errors import InvalidLineItemError
from invoice_exports.models.invoice import (
    InvoiceLineItem,
    line_item_from_dict,
    line_items_from_dicts,
)


def test_from_components_builds_emission():
    item = InvoiceLineItem.from_components(
        1, "Falciatrice", Decimal("74.99"), 2, 1, 2018, 6, 14, 9, 30, 12, "Mario"
    )
    assert item.bill_emission == datetime.datetime(2018, 6, 14, 9, 30, 12)
    assert item.line_total == Decimal("149.98")


def test_from_components_rejects_invalid_date():
    with pytest.raises(InvalidLineItemError):
        InvoiceLineItem.from_components(1, "X", Decimal("1"), 1, 1, 2018, 2, 30, 0, 0, 0, "Mario")


def test_from_components_rejects_unparseable_price():
    with pytest.raises(InvalidLineItemError):
        InvoiceLineItem.from_components(1, "X", "abc", 1, 1, 2018, 2, 1, 0, 0, 0, "Mario")


def test_items_are_frozen():
    item = InvoiceLineItem.from_components(1, "X", "1.50", 1, 1, 2018, 1, 1, 0, 0, 0, "Mario")
    with pytest.raises(AttributeError):
        item.quantity = 3


def test_negative_quantity_rejected():
    with pytest.raises(InvalidLineItemError):
        InvoiceLineItem.from_components(1, "X", "1.50", -1, 1, 2018, 1, 1, 0, 0, 0, "Mario")


def test_float_price_rejected_by_constructor():
    with pytest.raises(InvalidLineItemError):
        InvoiceLineItem(
            id=1,
            product_name="X",
            product_price=1.5,
            quantity=1,
            bill_id=1,
            bill_emission=datetime.datetime(2018, 1, 1),
            employee="Mario",
        )


def test_line_item_from_dict_casts_price_and_timestamp():
    item = line_item_from_dict(
        {
            "id": 4,
            "product_name": "Concime",
            "product_price": 5.99,
            "quantity": 10,
            "bill_id": 3,
            "bill_emission": "2018-06-16T12:12:12",
            "employee": "Luigi",
        }
    )
    assert item.product_price == Decimal("5.99")
    assert item.bill_emission == datetime.datetime(2018, 6, 16, 12, 12, 12)


def test_line_item_from_dict_missing_key():
    with pytest.raises(InvalidLineItemError):
        line_item_from_dict({"id": 1, "product_name": "X"})


def test_line_item_from_dict_bad_timestamp():
    with pytest.raises(InvalidLineItemError):
        line_item_from_dict(
            {
                "id": 1,
                "product_name": "X",
                "product_price": "1",
                "quantity": 1,
                "bill_id": 1,
                "bill_emission": "not a date",
                "employee": "Mario",
            }
        )


def test_line_items_from_dicts_preserves_order():
    rows = [
        {
            "id": i,
            "product_name": f"P{i}",
            "product_price": "1.00",
            "quantity": 1,
            "bill_id": 1,
            "bill_emission": datetime.datetime(2018, 1, 1),
            "employee": "Mario",
        }
        for i in (3, 1, 2)
    ]
    assert [item.id for item in line_items_from_dicts(rows)] == [3, 1, 2]
