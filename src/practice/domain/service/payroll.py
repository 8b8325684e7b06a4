"""Domain service: Payroll.

Pay rules written as guard clauses: each special case returns early and
the normal case is the last line.
"""

from __future__ import annotations

from decimal import Decimal

from practice.domain.model.employee import Employee

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
RETIRED_PAY_RATIO = Decimal("0.5")


def pay_amount(employee: Employee) -> Decimal:
    """Return what *employee* is paid this period.

    Separation takes precedence over retirement.
    """
    if employee.is_separated:
        return Decimal("0")
    if employee.is_retired:
        return _retired_amount(employee)
    return _normal_pay_amount(employee)


def _retired_amount(employee: Employee) -> Decimal:
    return employee.salary * RETIRED_PAY_RATIO


def _normal_pay_amount(employee: Employee) -> Decimal:
    return employee.salary
