"""Year totals and the per-student reductions behind them.

All amounts were coerced when the records were built, so these reductions
are plain sums. None of them looks at dates: a record with an unresolved
date still counts here.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from school_finance.aggregate.calendar import DEFAULT_CALENDAR, CalendarConfig
from school_finance.models import (
    Donor,
    Expense,
    StaffSalary,
    Student,
    Totals,
    UnpaidSeason,
    WorkbookData,
)


def seasonal_subscriptions(students: Sequence[Student]) -> list[float]:
    """Return the subscription income collected in each of the four seasons."""
    return [sum((s.seasons[i] for s in students), 0.0) for i in range(4)]


def group_income(students: Iterable[Student]) -> dict[str, float]:
    """Sum each teacher's students' season payments.

    Students without a teacher are left out. Keys keep the order in which
    teachers first appear in the sheet.
    """
    income: dict[str, float] = {}
    for s in students:
        if not s.teacher:
            continue
        income[s.teacher] = income.get(s.teacher, 0.0) + s.total_paid
    return income


def unpaid_seasons(
    students: Iterable[Student],
    calendar: CalendarConfig = DEFAULT_CALENDAR,
) -> list[UnpaidSeason]:
    """List every student/season pair whose amount is exactly zero.

    Negative amounts (refunds) are non-zero and therefore count as paid.
    Entries are ordered by student row, then season.
    """
    return [
        UnpaidSeason(
            name=s.full_name,
            season=calendar.seasons[i],
            season_index=i,
            teacher=s.teacher,
        )
        for s in students
        for i, amount in enumerate(s.seasons)
        if amount == 0
    ]


def total_salaries(salaries: Iterable[StaffSalary]) -> float:
    """Annual salary cost: every column of every staff row except name and role."""
    return sum((s.annual_salary for s in salaries), 0.0)


def total_amount(records: Iterable[Donor | Expense]) -> float:
    """Sum the `amount` of donor or expense records, whatever their date."""
    return sum((r.amount for r in records), 0.0)


def compute_totals(data: WorkbookData) -> Totals:
    """Reduce the four record sets to the year totals.

    Args:
        data: Typed workbook records.

    Returns:
        `Totals` where ``expenses = salaries + general_expenses``,
        ``income = subscriptions + donations`` and
        ``net_profit = income - expenses``.
    """
    subscriptions = sum(seasonal_subscriptions(data.students), 0.0)
    donations = total_amount(data.donors)
    salaries = total_salaries(data.salaries)
    general = total_amount(data.expenses)

    expenses = salaries + general
    income = subscriptions + donations

    return Totals(
        student_count=len(data.students),
        subscriptions=subscriptions,
        donations=donations,
        salaries=salaries,
        general_expenses=general,
        expenses=expenses,
        income=income,
        net_profit=income - expenses,
    )
