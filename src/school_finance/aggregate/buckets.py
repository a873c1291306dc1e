"""Monthly and seasonal bucketing of dated amounts.

Buckets are fixed-size lists ordered by the calendar (12 months, 4 seasons),
never by the order rows appear in the sheet. Records whose date cannot be
resolved are skipped here; they still count in the year totals.
"""
from __future__ import annotations

import logging
from typing import Iterable, Protocol, Sequence

from school_finance.aggregate.calendar import DEFAULT_CALENDAR, MONTHS_PER_SEASON, CalendarConfig
from school_finance.aggregate.dates import resolve_month_index
from school_finance.models import Expense, StaffSalary

log = logging.getLogger(__name__)


class DatedAmount(Protocol):
    amount: float
    date: object


def _empty_months(calendar: CalendarConfig) -> list[float]:
    return [0.0] * len(calendar.months)


def monthly_salaries(
    salaries: Iterable[StaffSalary],
    calendar: CalendarConfig = DEFAULT_CALENDAR,
) -> list[float]:
    """Sum staff salaries per calendar month.

    Each month is read from the salary column mapped to it by the calendar,
    so the prefixed first-month column is picked up like the other eleven.
    Extra (non-month) columns are not part of any month.

    Args:
        salaries: Staff salary records.
        calendar: Month/season tables.

    Returns:
        Twelve monthly totals in calendar order.
    """
    staff = list(salaries)
    return [
        sum((s.amount_for(calendar.salary_column(month)) for s in staff), 0.0)
        for month in calendar.months
    ]


def monthly_amounts(
    records: Iterable[DatedAmount],
    calendar: CalendarConfig = DEFAULT_CALENDAR,
) -> list[float]:
    """Sum dated amounts (expenses or donations) per calendar month.

    Args:
        records: Records exposing `amount` and a raw `date` cell.
        calendar: Month/season tables.

    Returns:
        Twelve monthly totals; unresolved dates are skipped.
    """
    buckets = _empty_months(calendar)
    skipped = 0
    for rec in records:
        month = resolve_month_index(rec.date)
        if month is None:
            skipped += 1
            continue
        buckets[month] += rec.amount

    if skipped:
        log.debug("Skipped %d records with unresolved dates from monthly buckets", skipped)
    return buckets


def seasonal_from_monthly(monthly: Sequence[float]) -> list[float]:
    """Fold twelve monthly values into four seasons of three months each."""
    return [
        sum(monthly[i : i + MONTHS_PER_SEASON], 0.0)
        for i in range(0, len(monthly), MONTHS_PER_SEASON)
    ]


def seasonal_amounts(
    records: Iterable[DatedAmount],
    calendar: CalendarConfig = DEFAULT_CALENDAR,
) -> list[float]:
    """Sum dated amounts per season straight from each record's month.

    Returns:
        Four seasonal totals; unresolved dates are skipped.
    """
    buckets = [0.0] * len(calendar.seasons)
    skipped = 0
    for rec in records:
        month = resolve_month_index(rec.date)
        if month is None:
            skipped += 1
            continue
        buckets[calendar.season_of(month)] += rec.amount

    if skipped:
        log.debug("Skipped %d records with unresolved dates from seasonal buckets", skipped)
    return buckets


def monthly_by_type(
    expenses: Iterable[Expense],
    calendar: CalendarConfig = DEFAULT_CALENDAR,
) -> dict[str, list[float]]:
    """Build a twelve-month series per expense type label.

    Expenses with no type label or an unresolved date are left out. Types
    keep the order in which they first appear.
    """
    by_type: dict[str, list[float]] = {}
    for exp in expenses:
        month = resolve_month_index(exp.date)
        if not exp.expense_type or month is None:
            continue
        series = by_type.setdefault(exp.expense_type, _empty_months(calendar))
        series[month] += exp.amount
    return by_type
