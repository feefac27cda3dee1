"""Output path resolution for report workbooks."""

from __future__ import annotations

import pathlib

from invoice_exports.config import settings


def resolve_output_path(
    file_name: str, output_dir: str | pathlib.Path | None = None
) -> pathlib.Path:
    """Place `file_name` inside the output directory, creating the directory if needed.

    Args:
        file_name (str): Workbook file name, e.g. ``"FlatData.xlsx"``.
        output_dir (str | pathlib.Path | None): Directory to use instead of
            `settings.output_dir`.

    Returns:
        pathlib.Path: Full path of the workbook.

    """
    if pathlib.Path(file_name).name != file_name:
        raise ValueError(f"Expected a bare file name, got {file_name!r}")
    directory = pathlib.Path(output_dir) if output_dir is not None else pathlib.Path(settings.output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    return directory / file_name
