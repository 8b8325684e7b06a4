"""Domain service: Discount Policy.

Maps a customer's age to a discount rate. Tiers are checked from the
highest threshold down and the first match wins. Comparisons are strict,
so a customer aged exactly 65 gets the adult rate and one aged exactly
18 gets the youth rate.
"""

from __future__ import annotations

from decimal import Decimal

from practice.domain.model.customer import Customer

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
SENIOR_AGE = 65
ADULT_AGE = 18

SENIOR_DISCOUNT = Decimal("0.15")
ADULT_DISCOUNT = Decimal("0.10")
YOUTH_DISCOUNT = Decimal("0.05")


def calculate_discount(customer: Customer) -> Decimal:
    if customer.age > SENIOR_AGE:
        return SENIOR_DISCOUNT
    if customer.age > ADULT_AGE:
        return ADULT_DISCOUNT
    return YOUTH_DISCOUNT
