import pathlib

import pytest

from invoice_exports.errors import ExportWriteError
from invoice_exports.pipeline import ExportPipeline, run_exports
from invoice_exports.sample import sample_line_items


def test_run_exports_writes_all_reports(tmp_path: pathlib.Path):
    written = run_exports(sample_line_items(), tmp_path)
    assert list(written) == ["flat_data", "sales_per_employee", "bill_invoice"]
    assert written["flat_data"] == tmp_path / "FlatData.xlsx"
    assert written["sales_per_employee"] == tmp_path / "TotalSalesPerEmployee.xlsx"
    assert written["bill_invoice"] == tmp_path / "BillInvoice.xlsx"
    assert all(p.exists() for p in written.values())


def test_run_exports_accepts_generator(tmp_path: pathlib.Path):
    written = run_exports((item for item in sample_line_items()), tmp_path)
    assert len(written) == 3


def test_pipeline_propagates_write_errors(tmp_path: pathlib.Path):
    (tmp_path / "FlatData.xlsx").mkdir()
    with pytest.raises(ExportWriteError):
        ExportPipeline(tmp_path).run(sample_line_items())
    assert not (tmp_path / "TotalSalesPerEmployee.xlsx").exists()
