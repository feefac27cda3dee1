"""Typed models for invoice line-items and spreadsheet cells.

Expose the dataclass models and construction helpers used across the project.
"""

from .cell import Cell, CellValue, render_value
from .invoice import InvoiceLineItem, line_item_from_dict, line_items_from_dicts

__all__ = [
    "Cell",
    "CellValue",
    "InvoiceLineItem",
    "line_item_from_dict",
    "line_items_from_dicts",
    "render_value",
]
