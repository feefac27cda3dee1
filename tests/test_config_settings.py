import pathlib

from invoice_exports.config import Settings, settings


def test_default_file_names():
    assert settings.flat_data_file == "FlatData.xlsx"
    assert settings.sales_per_employee_file == "TotalSalesPerEmployee.xlsx"
    assert settings.bill_invoice_file == "BillInvoice.xlsx"
    assert settings.worksheet_name == "export"


def test_env_overrides(monkeypatch, tmp_path: pathlib.Path):
    monkeypatch.setenv("INVOICE_EXPORTS_OUTPUT_DIR", str(tmp_path))
    monkeypatch.setenv("INVOICE_EXPORTS_WORKSHEET_NAME", "data")
    s = Settings()
    assert s.output_dir == tmp_path
    assert s.worksheet_name == "data"
