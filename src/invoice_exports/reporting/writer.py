"""Workbook writer placing cells onto a single Excel worksheet.

Cells are first laid out into a dense Polars string grid (`cells_to_frame`)
and then written cell by cell as plain strings, so that each value ends up as
text at its own (row, column) coordinate of a plain worksheet.
"""

from __future__ import annotations

import pathlib
from collections.abc import Iterable

import polars as pl
import xlsxwriter
from xlsxwriter.exceptions import XlsxWriterException

from invoice_exports.config import settings
from invoice_exports.errors import ExportWriteError
from invoice_exports.models.cell import Cell, render_value

# cell text is never turned into formulas or hyperlinks
WORKBOOK_OPTIONS = {"strings_to_formulas": False, "strings_to_urls": False}


def _column_name(column: int) -> str:
    return f"column_{column}"


def cells_to_frame(cells: Iterable[Cell]) -> pl.DataFrame:
    """Lay out cells into a dense Polars DataFrame of rendered strings.

    Row ``r`` of the sheet becomes frame row ``r - 1`` and column ``c`` becomes
    the frame column named ``column_<c>``. Coordinates without a cell are null.
    A later cell at an already used coordinate overwrites the earlier one.

    Args:
        cells (Iterable[Cell]): Cells to lay out.

    Returns:
        pl.DataFrame: A frame of ``max(row)`` rows and ``max(column)`` Utf8 columns.

    """
    grid: dict[tuple[int, int], str] = {}
    n_rows = 0
    n_cols = 0
    for cell in cells:
        grid[(cell.row, cell.column)] = render_value(cell.value)
        n_rows = max(n_rows, cell.row)
        n_cols = max(n_cols, cell.column)

    data = {
        _column_name(c): [grid.get((r, c)) for r in range(1, n_rows + 1)]
        for c in range(1, n_cols + 1)
    }
    return pl.DataFrame(data, schema={name: pl.Utf8 for name in data})


def write_cells(
    path: str | pathlib.Path,
    cells: Iterable[Cell],
    *,
    worksheet: str | None = None,
) -> pathlib.Path:
    """Write cells to a single-sheet Excel workbook, replacing any existing file.

    Args:
        path (str | pathlib.Path): Target workbook path; `.xlsx` is appended
            when the suffix is missing.
        cells (Iterable[Cell]): Cells to write, rendered as text.
        worksheet (str | None): Worksheet name, `settings.worksheet_name` by default.

    Returns:
        pathlib.Path: Path object pointing to the file written.

    Raises:
        ExportWriteError: If the workbook cannot be created or saved.

    """
    p = pathlib.Path(path)
    if p.suffix.lower() != ".xlsx":
        p = p.with_name(p.name + ".xlsx")
    if p.is_dir():
        raise ExportWriteError(p, "target is a directory")

    frame = cells_to_frame(cells)
    sheet = worksheet or settings.worksheet_name

    # the workbook is closed (and saved) by the context manager on every path
    try:
        with xlsxwriter.Workbook(str(p), WORKBOOK_OPTIONS) as workbook:
            ws = workbook.add_worksheet(sheet)
            for r, values in enumerate(frame.iter_rows()):
                for c, value in enumerate(values):
                    if value is not None:
                        ws.write_string(r, c, value)
            ws.autofit()
    except (OSError, XlsxWriterException) as exc:
        raise ExportWriteError(p, str(exc)) from exc
    return p
