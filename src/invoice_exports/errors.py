"""Exception hierarchy for invoice_exports."""

from __future__ import annotations

import pathlib


class InvoiceExportError(Exception):
    """Base class for every error raised by this package."""


class InvalidLineItemError(InvoiceExportError, ValueError):
    """Raised when a line-item cannot be constructed from the given values."""


class ExportWriteError(InvoiceExportError, OSError):
    """Raised when a report cannot be written to its target path.

    The underlying cause is always chained via ``raise ... from``.
    """

    def __init__(self, path: pathlib.Path, reason: str) -> None:
        self.path = pathlib.Path(path)
        self.reason = reason
        super().__init__(f"Failed to write report to {self.path}: {reason}")