"""Spreadsheet cell model and value rendering."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

CellValue = str | int | Decimal | datetime

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Cell:
    """One value placed at a 1-based (row, column) coordinate of the output grid."""

    row: int
    column: int
    value: CellValue

    def __post_init__(self) -> None:
        if self.row < 1 or self.column < 1:
            raise ValueError(f"Cell coordinates are 1-based, got ({self.row}, {self.column})")


def render_value(value: CellValue) -> str:
    """Render a cell value to the text written into the workbook.

    Datetimes use ``YYYY-MM-DD HH:MM:SS``; decimals keep their exact digits
    (``Decimal("74.99")`` renders as ``"74.99"``). Everything else uses `str`.
    """
    if isinstance(value, datetime):
        return value.strftime(DATETIME_FORMAT)
    return str(value)
