"""Application configuration and environment-aware settings.

This module defines a `Settings` class (pydantic `BaseSettings`) holding the
output directory, report file names, worksheet name and logging defaults.
Every value may be overridden via environment variables using the
`INVOICE_EXPORTS_` prefix.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings


def _default_output_dir() -> Path:
    """Return the user's Desktop when present, otherwise the home directory."""
    desktop = Path.home() / "Desktop"
    return desktop if desktop.is_dir() else Path.home()


class Settings(BaseSettings):
    """Top-level pydantic Settings container for invoice_exports configuration.

    The defaults mirror where the reports were historically written (the
    Desktop) and the names each report file carries.
    """

    # Output locations
    output_dir: Path = Field(default_factory=_default_output_dir)
    flat_data_file: str = "FlatData.xlsx"
    sales_per_employee_file: str = "TotalSalesPerEmployee.xlsx"
    bill_invoice_file: str = "BillInvoice.xlsx"
    worksheet_name: str = "export"

    log_file: Path = Path(__file__).parent.parent / "logs" / "invoice_exports.log"
    # UI / behaviour toggles
    enable_progress: bool = True

    model_config = ConfigDict(env_prefix="INVOICE_EXPORTS_")


settings = Settings()
