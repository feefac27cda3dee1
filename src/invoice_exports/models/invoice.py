"""Invoice line-item dataclass and construction helpers.

Items are frozen once built. Besides the plain constructor, `from_components`
builds the emission timestamp from its date/time parts and
`line_item_from_dict` loads an item from a mapping through `dacite`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from dacite import Config, DaciteError, from_dict

from invoice_exports.errors import InvalidLineItemError


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise InvalidLineItemError(f"Not a price: {value!r}")
    # go through str so 74.99 stays 74.99 instead of its binary expansion
    return Decimal(str(value))


def _to_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


line_item_config = Config(
    strict=True,
    check_types=True,
    type_hooks={Decimal: _to_decimal, datetime: _to_datetime},
)


@dataclass(frozen=True)
class InvoiceLineItem:
    """One product sold within one bill.

    All items sharing a `bill_id` are expected to carry the same
    `bill_emission` and `employee`; the bill report takes the first item of a
    bill as representative for the whole group.
    """

    id: int
    product_name: str
    product_price: Decimal
    quantity: int
    bill_id: int
    bill_emission: datetime
    employee: str

    def __post_init__(self) -> None:
        if not isinstance(self.product_price, Decimal):
            raise InvalidLineItemError(
                f"product_price must be a Decimal, got {type(self.product_price).__name__}"
            )
        if not self.product_price.is_finite():
            raise InvalidLineItemError(f"product_price must be finite, got {self.product_price}")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidLineItemError(f"quantity must be an int, got {self.quantity!r}")
        if self.quantity < 0:
            raise InvalidLineItemError(f"quantity must not be negative, got {self.quantity}")
        if not isinstance(self.bill_emission, datetime):
            raise InvalidLineItemError(
                f"bill_emission must be a datetime, got {type(self.bill_emission).__name__}"
            )

    @property
    def line_total(self) -> Decimal:
        """Exact revenue of this line: price times quantity."""
        return self.product_price * self.quantity

    @classmethod
    def from_components(
        cls,
        id: int,
        product_name: str,
        product_price: Decimal | str | int,
        quantity: int,
        bill_id: int,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        employee: str,
    ) -> InvoiceLineItem:
        """Build an item, assembling `bill_emission` from its date/time parts.

        Raises:
            InvalidLineItemError: If the date components do not form a valid
                datetime or the price cannot be read as a decimal.

        """
        try:
            emission = datetime(year, month, day, hour, minute, second)
        except (TypeError, ValueError) as exc:
            raise InvalidLineItemError(f"Invalid emission date for item {id}: {exc}") from exc
        try:
            price = _to_decimal(product_price)
        except InvalidOperation as exc:
            raise InvalidLineItemError(f"Invalid price for item {id}: {product_price!r}") from exc
        return cls(
            id=id,
            product_name=product_name,
            product_price=price,
            quantity=quantity,
            bill_id=bill_id,
            bill_emission=emission,
            employee=employee,
        )


def line_item_from_dict(data: Mapping[str, Any]) -> InvoiceLineItem:
    """Load an `InvoiceLineItem` from a mapping using `dacite`.

    Prices may be given as `Decimal`, `str`, `int` or `float` and are cast to
    `Decimal`; `bill_emission` may be a `datetime` or an ISO-8601 string.

    Args:
        data (Mapping[str, Any]): Field name to value mapping.

    Returns:
        InvoiceLineItem: The constructed item.

    Raises:
        InvalidLineItemError: On missing/unexpected keys, wrong types or
            unparseable values.

    """
    try:
        return from_dict(InvoiceLineItem, dict(data), config=line_item_config)
    except InvalidLineItemError:
        raise
    except (DaciteError, InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidLineItemError(f"Invalid line item {dict(data)!r}: {exc}") from exc


def line_items_from_dicts(rows: Iterable[Mapping[str, Any]]) -> list[InvoiceLineItem]:
    """Load a list of items, preserving input order."""
    return [line_item_from_dict(row) for row in rows]
