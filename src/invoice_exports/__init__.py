"""invoice_exports - spreadsheet reports over invoice line-items.

The package turns an in-memory collection of invoice line-items into three
Excel reports: a flat dump, total sales per employee and a bill-grouped
invoice listing.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
