"""Account aggregate — a balance that can go negative up to a fixed limit.

The balance is only ever mutated through ``withdraw()``, which checks its
guard clauses before touching any state.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from practice.domain.exceptions import InvalidArgumentError, InvalidOperationError
from practice.domain.model.value_objects import to_decimal
from practice.utils.logger import get_logger

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
OVERDRAFT_LIMIT = Decimal("500")


@dataclass
class Account:
    """Aggregate root for a single account.

    Invariants:
    - ``balance`` is never below ``-OVERDRAFT_LIMIT`` after a withdrawal
    - a rejected withdrawal leaves ``balance`` untouched
    """

    balance: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        self.balance = to_decimal(self.balance)

    def withdraw(self, amount: str | int | Decimal) -> None:
        """Take *amount* out of the account.

        Raises InvalidArgumentError for a non-positive amount, and
        InvalidOperationError if the overdraft limit would be exceeded.
        """
        amount = to_decimal(amount)

        if amount <= 0:
            logger.info("Rejected withdrawal of %s: amount must be positive", amount)
            raise InvalidArgumentError("Amount must be positive")

        if self.balance - amount < -OVERDRAFT_LIMIT:
            logger.info(
                "Rejected withdrawal of %s: balance %s, overdraft limit %s",
                amount,
                self.balance,
                OVERDRAFT_LIMIT,
            )
            raise InvalidOperationError("Insufficient funds")

        self.balance -= amount
        logger.debug("Withdrew %s, balance now %s", amount, self.balance)

    def can_withdraw(self, amount: str | int | Decimal) -> bool:
        """Return True if *amount* is non-negative.

        Only looks at the sign of *amount*; the overdraft limit is still
        enforced by ``withdraw()``.
        """
        return to_decimal(amount) >= 0
