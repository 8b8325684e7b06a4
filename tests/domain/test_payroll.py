"""Unit tests for the Employee entity and the payroll guard clauses."""

from decimal import Decimal

import pytest

from practice.domain.exceptions import InvalidArgumentError
from practice.domain.model.employee import Employee
from practice.domain.service.payroll import pay_amount


def _make_employee(**overrides) -> Employee:
    kwargs = {"name": "Alice", "salary": Decimal("4000")}
    kwargs.update(overrides)
    return Employee(**kwargs)


class TestPayAmount:

    def test_normal_employee_gets_full_salary(self):
        assert pay_amount(_make_employee()) == Decimal("4000")

    def test_retired_employee_gets_half(self):
        assert pay_amount(_make_employee(is_retired=True)) == Decimal("2000")

    def test_separated_employee_gets_nothing(self):
        assert pay_amount(_make_employee(is_separated=True)) == Decimal("0")

    def test_separated_takes_precedence_over_retired(self):
        employee = _make_employee(is_separated=True, is_retired=True)
        assert pay_amount(employee) == Decimal("0")


class TestEmployeeName:

    def test_name_set_at_construction(self):
        assert _make_employee(name="Bob").name == "Bob"

    def test_none_rejected_at_construction(self):
        with pytest.raises(InvalidArgumentError, match="Name cannot be None"):
            _make_employee(name=None)

    def test_none_rejected_by_setter_keeps_old_name(self):
        employee = _make_employee(name="Bob")
        with pytest.raises(InvalidArgumentError):
            employee.name = None
        assert employee.name == "Bob"

    def test_empty_string_allowed(self):
        employee = _make_employee()
        employee.name = ""
        assert employee.name == ""

    def test_salary_coerced_to_decimal(self):
        assert _make_employee(salary="1234.50").salary == Decimal("1234.50")
