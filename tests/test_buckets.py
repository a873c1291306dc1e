from __future__ import annotations

from school_finance.aggregate.buckets import (
    monthly_amounts,
    monthly_by_type,
    monthly_salaries,
    seasonal_amounts,
    seasonal_from_monthly,
)
from school_finance.aggregate.calendar import DEFAULT_CALENDAR, MONTHS, CalendarConfig
from school_finance.models import Donor, Expense, StaffSalary


def test_salary_months_read_prefixed_first_column() -> None:
    staff = StaffSalary(amounts={"شهر جانفي": 100, "فيفري": 200, "ديسمبر": 300, "منحة": 999})
    months = monthly_salaries([staff])
    assert months[0] == 100.0
    assert months[1] == 200.0
    assert months[11] == 300.0
    assert sum(months) == 600.0  # the bonus column belongs to no month


def test_bare_first_month_column_is_not_a_month() -> None:
    staff = StaffSalary(amounts={"جانفي": 100})
    assert monthly_salaries([staff])[0] == 0.0
    assert staff.annual_salary == 100.0


def test_monthly_amounts_skip_unresolved_dates() -> None:
    expenses = [
        Expense(amount=100, date="10/03/2024"),
        Expense(amount=50, date="2024-03-20"),
        Expense(amount=70, date="garbage"),
        Expense(amount=30, date=None),
    ]
    months = monthly_amounts(expenses)
    assert len(months) == 12
    assert months[2] == 150.0
    assert sum(months) == 150.0


def test_seasonal_from_monthly_groups_three_months() -> None:
    assert seasonal_from_monthly([1.0] * 12) == [3.0, 3.0, 3.0, 3.0]
    assert seasonal_from_monthly([0, 0, 5, 7, 0, 0, 0, 0, 0, 0, 0, 11]) == [5.0, 7.0, 0.0, 11.0]


def test_seasonal_amounts_use_quarter_boundaries() -> None:
    donors = [
        Donor(amount=10, date="15/02/2024"),  # Feb -> S1
        Donor(amount=20, date="01/03/2024"),  # Mar -> S1
        Donor(amount=30, date="01/04/2024"),  # Apr -> S2
        Donor(amount=40, date="30/09/2024"),  # Sep -> S3
        Donor(amount=50, date="01/10/2024"),  # Oct -> S4
        Donor(amount=60, date="?"),
    ]
    assert seasonal_amounts(donors) == [30.0, 30.0, 40.0, 50.0]


def test_monthly_by_type_orders_by_calendar_not_rows() -> None:
    expenses = [
        Expense(amount=5, date="01/12/2024", expense_type="كهرباء"),
        Expense(amount=7, date="01/01/2024", expense_type="صيانة"),
        Expense(amount=3, date="02/01/2024", expense_type="صيانة"),
        Expense(amount=9, date="01/01/2024", expense_type=None),
        Expense(amount=4, date="nope", expense_type="صيانة"),
    ]
    by_type = monthly_by_type(expenses)
    assert list(by_type) == ["كهرباء", "صيانة"]
    assert by_type["صيانة"][0] == 10.0
    assert sum(by_type["صيانة"]) == 10.0
    assert by_type["كهرباء"][11] == 5.0


def test_custom_calendar_salary_mapping() -> None:
    calendar = CalendarConfig(salary_columns={m: f"{m} (salary)" for m in MONTHS})
    staff = StaffSalary(amounts={"مارس (salary)": 42})
    assert monthly_salaries([staff], calendar)[2] == 42.0
    assert monthly_salaries([staff], DEFAULT_CALENDAR)[2] == 0.0
