"""Employee entity used by the payroll policy."""

from __future__ import annotations

from decimal import Decimal

from practice.domain.exceptions import InvalidArgumentError
from practice.domain.model.value_objects import to_decimal


class Employee:
    """An employee on the payroll.

    ``name`` is exposed as a property so the setter can refuse ``None``;
    an invalid name is never stored.
    """

    def __init__(
        self,
        name: str,
        salary: str | int | Decimal,
        is_separated: bool = False,
        is_retired: bool = False,
    ) -> None:
        self._name = ""
        self.name = name
        self.salary = to_decimal(salary)
        self.is_separated = is_separated
        self.is_retired = is_retired

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if value is None:
            raise InvalidArgumentError("Name cannot be None")
        self._name = value

    def __repr__(self) -> str:
        return (
            f"Employee(name={self._name!r}, salary={self.salary!r}, "
            f"is_separated={self.is_separated}, is_retired={self.is_retired})"
        )
