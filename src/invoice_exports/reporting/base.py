"""Exporter base class defining the header/rows/write pipeline.

Concrete exporters only provide their header titles and the data cells; the
base class places the header row, concatenates everything and hands the
result to the workbook writer in a single call.
"""

from __future__ import annotations

import abc
import pathlib
from collections.abc import Iterable, Sequence

from loguru import logger

from invoice_exports.models.cell import Cell
from invoice_exports.models.invoice import InvoiceLineItem
from invoice_exports.reporting.writer import write_cells

HEADER_ROW = 1
# row 2 is a blank spacer; data always starts below it
FIRST_DATA_ROW = 3


class Exporter(abc.ABC):
    """Base exporter writing one report of line-items to one workbook.

    Subclasses implement `headers` and `build_rows`; `export` is not meant to be
    overridden.
    """

    def __init__(self, file_path: str | pathlib.Path) -> None:
        """Initialize the exporter with its output target.

        Args:
            file_path (str | pathlib.Path): Workbook the report is written to.

        """
        self.file_path = pathlib.Path(file_path)
        # loguru logger is configured by invoice_exports.utils.logging
        self.logger = logger.bind(exporter=self.__class__.__name__)

    @abc.abstractmethod
    def headers(self) -> list[str]:
        """Return the column titles, in order."""

    @abc.abstractmethod
    def build_rows(self, items: Sequence[InvoiceLineItem]) -> list[Cell]:
        """Return the data cells, starting at `FIRST_DATA_ROW`."""

    def header_cells(self) -> list[Cell]:
        headers = self.headers()
        if not headers:
            raise ValueError(f"{self.__class__.__name__} declares no headers")
        return [Cell(HEADER_ROW, i, title) for i, title in enumerate(headers, start=1)]

    def transform(self, items: Iterable[InvoiceLineItem]) -> list[Cell]:
        """Return the header cells followed by the data cells, without writing."""
        return self.header_cells() + self.build_rows(list(items))

    def export(self, items: Iterable[InvoiceLineItem]) -> pathlib.Path:
        """Build the report and write it to `file_path`.

        Empty input is not an error: the workbook then holds the header row only.

        Returns:
            pathlib.Path: Path of the written workbook.

        Raises:
            ExportWriteError: If the workbook cannot be written. Any other
                failure while building the rows propagates unchanged; every
                failure is logged before it is re-raised.

        """
        try:
            cells = self.transform(items)
            self.logger.debug("Built {} cells for {}", len(cells), self.file_path)
            path = write_cells(self.file_path, cells)
        except Exception:
            self.logger.exception("Export to {} failed", self.file_path)
            raise
        self.logger.info("Wrote report to {}", path)
        return path
