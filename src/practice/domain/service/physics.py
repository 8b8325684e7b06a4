"""Potential energy with the gravitational constant named instead of inlined."""

from __future__ import annotations

from decimal import Decimal

from practice.domain.model.value_objects import to_decimal

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
GRAVITATIONAL_CONSTANT = Decimal("9.81")


def potential_energy(mass: str | int | Decimal, height: str | int | Decimal) -> Decimal:
    return to_decimal(mass) * GRAVITATIONAL_CONSTANT * to_decimal(height)
