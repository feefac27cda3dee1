"""Orchestrator running every report exporter over the same line-items.

This module exposes `ExportPipeline`, which resolves the output path of each
report, instantiates the three exporters and runs them one after the other.
"""

from __future__ import annotations

import pathlib
from collections.abc import Iterable

from loguru import logger
from tqdm import tqdm

from invoice_exports.config import settings
from invoice_exports.models.invoice import InvoiceLineItem
from invoice_exports.reporting.base import Exporter
from invoice_exports.reporting.exporters import (
    BillInvoiceExporter,
    FlatDataExporter,
    SalesPerEmployeeExporter,
)
from invoice_exports.utils.paths import resolve_output_path


class ExportPipeline:
    """Run the flat, per-employee and per-bill reports over one set of items.

    Exporters are independent: each one writes its own workbook. A failing
    exporter aborts the run and its error propagates to the caller; reports
    written before it stay on disk.
    """

    def __init__(self, output_dir: pathlib.Path | str | None = None) -> None:
        """Initialize the pipeline.

        Args:
            output_dir (pathlib.Path | str | None): Directory for the workbooks;
                `settings.output_dir` when omitted.

        """
        self.output_dir = pathlib.Path(output_dir) if output_dir is not None else None

    def exporters(self) -> dict[str, Exporter]:
        """Return the report name to exporter mapping, in run order."""
        return {
            "flat_data": FlatDataExporter(
                resolve_output_path(settings.flat_data_file, self.output_dir)
            ),
            "sales_per_employee": SalesPerEmployeeExporter(
                resolve_output_path(settings.sales_per_employee_file, self.output_dir)
            ),
            "bill_invoice": BillInvoiceExporter(
                resolve_output_path(settings.bill_invoice_file, self.output_dir)
            ),
        }

    def run(self, items: Iterable[InvoiceLineItem]) -> dict[str, pathlib.Path]:
        """Export `items` with every report.

        Args:
            items (Iterable[InvoiceLineItem]): Line-items to export; consumed once.

        Returns:
            dict[str, pathlib.Path]: Report name to written workbook path.

        """
        records = list(items)
        exporters = self.exporters()
        logger.info("Exporting {} line items to {} reports", len(records), len(exporters))

        written: dict[str, pathlib.Path] = {}
        for name, exporter in tqdm(
            exporters.items(), desc="reports", disable=not settings.enable_progress
        ):
            written[name] = exporter.export(records)
        return written


def run_exports(
    items: Iterable[InvoiceLineItem], output_dir: pathlib.Path | str | None = None
) -> dict[str, pathlib.Path]:
    """Convenience wrapper around `ExportPipeline(output_dir).run(items)`."""
    return ExportPipeline(output_dir).run(items)
