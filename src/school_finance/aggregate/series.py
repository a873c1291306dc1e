"""Calendar-ordered series for charts and KPI cards.

Every series has a fixed length (12 months or 4 seasons) and follows the
calendar order, whatever order the rows had in the sheet.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from school_finance.aggregate.calendar import DEFAULT_CALENDAR, CalendarConfig
from school_finance.aggregate.buckets import seasonal_from_monthly
from school_finance.models import (
    MonthlyExpense,
    SeasonIncome,
    SeasonPaymentStatus,
    SeasonProfit,
    Student,
)


def monthly_expense_series(
    salaries_by_month: Sequence[float],
    general_by_month: Sequence[float],
    calendar: CalendarConfig = DEFAULT_CALENDAR,
) -> list[MonthlyExpense]:
    """Combine monthly salaries and general expenses into one series.

    Args:
        salaries_by_month: Twelve monthly salary totals.
        general_by_month: Twelve monthly general-expense totals (dated only).
        calendar: Month/season tables.
    """
    return [
        MonthlyExpense(
            month=month,
            salaries=salaries_by_month[i],
            general_expenses=general_by_month[i],
            total=salaries_by_month[i] + general_by_month[i],
        )
        for i, month in enumerate(calendar.months)
    ]


def seasonal_income_analysis(
    subscriptions_by_season: Sequence[float],
    donations_by_season: Sequence[float],
    calendar: CalendarConfig = DEFAULT_CALENDAR,
) -> list[SeasonIncome]:
    """Per-season subscriptions, donations and their sum."""
    return [
        SeasonIncome(
            name=season,
            subscriptions=subscriptions_by_season[i],
            donations=donations_by_season[i],
            total=subscriptions_by_season[i] + donations_by_season[i],
        )
        for i, season in enumerate(calendar.seasons)
    ]


def seasonal_profit_analysis(
    income: Sequence[SeasonIncome],
    monthly_expenses: Sequence[MonthlyExpense],
) -> list[SeasonProfit]:
    """Per-season income against the season's share of monthly expenses.

    Season expenses are the monthly totals folded three months at a time.
    """
    expenses = seasonal_from_monthly([m.total for m in monthly_expenses])
    return [
        SeasonProfit(
            name=season.name,
            income=season.total,
            expenses=expenses[i],
            net_profit=season.total - expenses[i],
        )
        for i, season in enumerate(income)
    ]


def seasonal_payment_status(
    students: Iterable[Student],
    calendar: CalendarConfig = DEFAULT_CALENDAR,
) -> list[SeasonPaymentStatus]:
    """Count paid and unpaid students per season (unpaid means exactly zero)."""
    paid = [0] * len(calendar.seasons)
    unpaid = [0] * len(calendar.seasons)
    for s in students:
        for i, amount in enumerate(s.seasons):
            if amount == 0:
                unpaid[i] += 1
            else:
                paid[i] += 1

    return [
        SeasonPaymentStatus(name=season, paid=paid[i], unpaid=unpaid[i])
        for i, season in enumerate(calendar.seasons)
    ]
