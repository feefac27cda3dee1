import datetime
from decimal import Decimal

import pytest

from invoice_exports.config import settings
from invoice_exports.models.invoice import InvoiceLineItem


def make_item(id, name, price, qty, bill, employee, emission=None):
    return InvoiceLineItem(
        id=id,
        product_name=name,
        product_price=Decimal(price),
        quantity=qty,
        bill_id=bill,
        bill_emission=emission or datetime.datetime(2018, 6, 14, 9, 30, 12),
        employee=employee,
    )


@pytest.fixture
def item_factory():
    return make_item


@pytest.fixture
def scenario_items():
    return [
        make_item(1, "A", "10.00", 2, 1, "Mario"),
        make_item(2, "B", "5.00", 1, 1, "Mario"),
    ]


@pytest.fixture(autouse=True)
def no_progress(monkeypatch):
    monkeypatch.setattr(settings, "enable_progress", False)
