"""Order and its line items.

An Order is owned by the caller and only read when it is totaled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from practice.domain.exceptions import InvalidArgumentError
from practice.domain.model.value_objects import to_decimal


@dataclass(frozen=True)
class OrderLine:
    """One product on an order: how many, and at what unit price."""

    product_name: str
    quantity: int
    unit_price: Decimal

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidArgumentError(
                f"Quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity < 0:
            raise InvalidArgumentError(
                f"Quantity cannot be negative, got {self.quantity}"
            )
        price = to_decimal(self.unit_price)
        if price < Decimal("0"):
            raise InvalidArgumentError(
                f"Unit price cannot be negative, got {price}"
            )
        object.__setattr__(self, "unit_price", price)

    @property
    def line_total(self) -> Decimal:
        return self.quantity * self.unit_price


@dataclass
class Order:
    customer: str
    lines: list[OrderLine] = field(default_factory=list)

    @property
    def outstanding(self) -> Decimal:
        """Sum of every line total; zero for an order without lines."""
        return sum((line.line_total for line in self.lines), Decimal("0"))
