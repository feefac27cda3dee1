"""Reporting package exporting the exporters and the workbook writer.

This package exposes the exporter base class, the three concrete report
exporters and the helper that writes cell sequences to Excel files.
"""

from .base import FIRST_DATA_ROW as FIRST_DATA_ROW
from .base import Exporter as Exporter
from .exporters import BillInvoiceExporter as BillInvoiceExporter
from .exporters import FlatDataExporter as FlatDataExporter
from .exporters import SalesPerEmployeeExporter as SalesPerEmployeeExporter
from .writer import cells_to_frame as cells_to_frame
from .writer import write_cells as write_cells
