"""Domain service: Order Totaling.

Extracted from the old "print what the customer owes" routine so the
calculation can be tested without any console output.
"""

from __future__ import annotations

from decimal import Decimal

from practice.domain.model.order import Order


def calculate_outstanding(order: Order) -> Decimal:
    """Return the sum of ``quantity * unit_price`` over all lines.

    An order with no lines owes ``Decimal("0")``. No rounding is applied.
    """
    return order.outstanding
