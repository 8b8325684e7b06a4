"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from practice.domain.exceptions import InvalidArgumentError


def to_decimal(amount: str | float | int | Decimal) -> Decimal:
    """Coerce *amount* to a finite Decimal via ``str`` so floats keep their printed value."""
    if isinstance(amount, Decimal):
        d = amount
    else:
        try:
            d = Decimal(str(amount))
        except (InvalidOperation, ValueError) as exc:
            raise InvalidArgumentError(f"Invalid amount: {amount!r}") from exc
    if not d.is_finite():
        raise InvalidArgumentError(f"Invalid amount: {amount!r}")
    return d


@dataclass(frozen=True)
class Address:
    """Postal address, grouped so it travels as one parameter."""

    street: str
    city: str
    state: str
    postal_code: str

    def __str__(self) -> str:
        return f"{self.street}, {self.city}, {self.state} {self.postal_code}"
