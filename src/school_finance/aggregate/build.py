"""Full aggregation pipeline.

`build_aggregate` runs every stage over one `WorkbookData` and returns the
complete `FinancialAggregate`. It is a pure function: the same records always
give the same aggregate, and no input problem makes it raise (missing or
malformed values were coerced to zero when the records were built, and
unresolved dates only drop a record from the dated views).

`FinanceDataset` holds the current upload and its aggregate, replacing both
together whenever new data is set.
"""
from __future__ import annotations

import logging

from school_finance.aggregate.buckets import (
    monthly_amounts,
    monthly_by_type,
    monthly_salaries,
    seasonal_amounts,
)
from school_finance.aggregate.calendar import DEFAULT_CALENDAR, CalendarConfig
from school_finance.aggregate.risk import compute_risk_radar
from school_finance.aggregate.series import (
    monthly_expense_series,
    seasonal_income_analysis,
    seasonal_payment_status,
    seasonal_profit_analysis,
)
from school_finance.aggregate.totals import (
    compute_totals,
    group_income,
    seasonal_subscriptions,
    unpaid_seasons,
)
from school_finance.models import FinancialAggregate, WorkbookData

log = logging.getLogger(__name__)


def build_aggregate(
    data: WorkbookData,
    calendar: CalendarConfig = DEFAULT_CALENDAR,
) -> FinancialAggregate:
    """Derive every metric from the four record sets.

    Args:
        data: Typed workbook records.
        calendar: Month/season tables used by the bucketing stages.

    Returns:
        The complete `FinancialAggregate`.
    """
    totals = compute_totals(data)

    monthly = monthly_expense_series(
        monthly_salaries(data.salaries, calendar),
        monthly_amounts(data.expenses, calendar),
        calendar,
    )
    income = seasonal_income_analysis(
        seasonal_subscriptions(data.students),
        seasonal_amounts(data.donors, calendar),
        calendar,
    )

    aggregate = FinancialAggregate(
        totals=totals,
        unpaid_students=unpaid_seasons(data.students, calendar),
        group_income=group_income(data.students),
        monthly_expenses=monthly,
        seasonal_payment_status=seasonal_payment_status(data.students, calendar),
        seasonal_income_analysis=income,
        seasonal_analysis=seasonal_profit_analysis(income, monthly),
        risk_radar=compute_risk_radar(
            totals,
            data.donors,
            monthly_by_type(data.expenses, calendar),
        ),
    )

    log.info(
        "Aggregated students=%d staff=%d donors=%d expenses=%d: income=%.2f expenses=%.2f net=%.2f",
        len(data.students),
        len(data.salaries),
        len(data.donors),
        len(data.expenses),
        totals.income,
        totals.expenses,
        totals.net_profit,
    )
    return aggregate


class FinanceDataset:
    """The currently loaded workbook and the aggregate derived from it.

    Setting new data discards the previous records and aggregate together;
    there is no partial update.
    """

    def __init__(self, calendar: CalendarConfig = DEFAULT_CALENDAR) -> None:
        self._calendar = calendar
        self._data: WorkbookData | None = None
        self._aggregate: FinancialAggregate | None = None

    @property
    def data(self) -> WorkbookData | None:
        return self._data

    @property
    def aggregate(self) -> FinancialAggregate | None:
        return self._aggregate

    def set_data(self, data: WorkbookData | None) -> FinancialAggregate | None:
        """Replace the loaded records (``None`` clears) and recompute."""
        aggregate = build_aggregate(data, self._calendar) if data is not None else None
        self._data, self._aggregate = data, aggregate
        return aggregate
