"""Concrete report exporters over invoice line-items.

- `FlatDataExporter`: one row per item, every attribute in its own column.
- `SalesPerEmployeeExporter`: one row per employee with the exact revenue total.
- `BillInvoiceExporter`: a header row per bill, its item rows, then a spacer.

Grouping always follows first-occurrence order of the group key in the input.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from invoice_exports.models.cell import Cell
from invoice_exports.models.invoice import InvoiceLineItem
from invoice_exports.reporting.base import FIRST_DATA_ROW, Exporter


@dataclass
class BillGroup:
    """Items of one bill, represented by the first item's emission and employee."""

    bill_id: int
    emission: datetime
    employee: str
    items: list[InvoiceLineItem] = field(default_factory=list)


def sales_per_employee(items: Iterable[InvoiceLineItem]) -> dict[str, Decimal]:
    """Sum ``price * quantity`` per employee with exact decimal arithmetic.

    Args:
        items (Iterable[InvoiceLineItem]): Line-items to aggregate.

    Returns:
        dict[str, Decimal]: Employee name to total sales, in first-occurrence order.

    """
    totals: dict[str, Decimal] = {}
    for item in items:
        totals[item.employee] = totals.get(item.employee, Decimal(0)) + item.line_total
    return totals


def group_bills(items: Iterable[InvoiceLineItem]) -> list[BillGroup]:
    """Group items by `bill_id`, keeping first-occurrence order of bills and input order within a bill."""
    groups: dict[int, BillGroup] = {}
    for item in items:
        group = groups.get(item.bill_id)
        if group is None:
            group = BillGroup(item.bill_id, item.bill_emission, item.employee)
            groups[item.bill_id] = group
        group.items.append(item)
    return list(groups.values())


class FlatDataExporter(Exporter):
    """Write every line-item unchanged, one row per item in input order."""

    def headers(self) -> list[str]:
        return [
            "Id",
            "ProductName",
            "ProductPrice",
            "Quantity",
            "BillId",
            "BillEmission",
            "Employee",
        ]

    def build_rows(self, items: Sequence[InvoiceLineItem]) -> list[Cell]:
        cells: list[Cell] = []
        for row, item in enumerate(items, start=FIRST_DATA_ROW):
            values = (
                item.id,
                item.product_name,
                item.product_price,
                item.quantity,
                item.bill_id,
                item.bill_emission,
                item.employee,
            )
            cells.extend(Cell(row, column, value) for column, value in enumerate(values, start=1))
        return cells


class SalesPerEmployeeExporter(Exporter):
    """Write the total sales of each employee, one row per employee."""

    def headers(self) -> list[str]:
        return ["Employee", "Total Sales"]

    def build_rows(self, items: Sequence[InvoiceLineItem]) -> list[Cell]:
        cells: list[Cell] = []
        totals = sales_per_employee(items)
        for row, (employee, total) in enumerate(totals.items(), start=FIRST_DATA_ROW):
            cells.append(Cell(row, 1, employee))
            cells.append(Cell(row, 2, total))
        return cells


class BillInvoiceExporter(Exporter):
    """Write each bill as a header row followed by its line-items and a blank row.

    Bill header rows fill columns 1-3 and item rows fill columns 4-7. A spacer
    row follows every bill, the last one included.
    """

    def headers(self) -> list[str]:
        return [
            "Bill Id",
            "Emission Date",
            "Employee Name",
            "Invoice Id",
            "Product Name",
            "Product Price",
            "Quantity",
        ]

    def build_rows(self, items: Sequence[InvoiceLineItem]) -> list[Cell]:
        cells: list[Cell] = []
        row = FIRST_DATA_ROW
        for group in group_bills(items):
            cells.append(Cell(row, 1, group.bill_id))
            cells.append(Cell(row, 2, group.emission))
            cells.append(Cell(row, 3, group.employee))
            row += 1

            for item in group.items:
                cells.append(Cell(row, 4, item.id))
                cells.append(Cell(row, 5, item.product_name))
                cells.append(Cell(row, 6, item.product_price))
                cells.append(Cell(row, 7, item.quantity))
                row += 1

            # spacer
            row += 1
        return cells
