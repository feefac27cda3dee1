"""Hard-coded sample line-items used by the export script."""

from __future__ import annotations

from decimal import Decimal

from invoice_exports.models.invoice import InvoiceLineItem


def sample_line_items() -> list[InvoiceLineItem]:
    """Return three bills worth of garden-shop sales by two employees."""
    return [
        InvoiceLineItem.from_components(1, "Falciatrice", Decimal("74.99"), 2, 1, 2018, 6, 14, 9, 30, 12, "Mario"),
        InvoiceLineItem.from_components(2, "Sega Elettrica", Decimal("150"), 3, 1, 2018, 6, 14, 9, 30, 12, "Mario"),
        InvoiceLineItem.from_components(3, "Tritatutto", Decimal("39.99"), 1, 2, 2018, 6, 14, 20, 40, 0, "Mario"),
        InvoiceLineItem.from_components(4, "Concime", Decimal("5.99"), 10, 3, 2018, 6, 16, 12, 12, 12, "Luigi"),
        InvoiceLineItem.from_components(5, "Forbici", Decimal("7.89"), 10, 3, 2018, 6, 16, 12, 12, 12, "Luigi"),
        InvoiceLineItem.from_components(6, "Tenaglie", Decimal("8.99"), 7, 3, 2018, 6, 16, 12, 12, 12, "Luigi"),
    ]
