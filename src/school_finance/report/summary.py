"""Hand-off to the external report writer.

The writer (an LLM-backed service in production) only ever sees the
flattened year totals as text. This module builds that text, the request and
response models, and a thin `generate_report` wrapper that validates what the
writer returns.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field

from school_finance.config import DEFAULT_CURRENCY, DEFAULT_SCHOOL_NAME
from school_finance.models import FinancialAggregate, Totals

log = logging.getLogger(__name__)

ReportType = Literal["monthly", "annual"]


class FinancialReportInput(BaseModel):
    """Request sent to the report writer."""
    model_config = ConfigDict(extra="forbid")
    report_type: ReportType
    financial_data_summary: str = Field(..., min_length=1)
    school_name: str = DEFAULT_SCHOOL_NAME


class FinancialReportOutput(BaseModel):
    """Free-text report returned by the writer."""
    model_config = ConfigDict(extra="ignore")
    report_summary: str
    actionable_recommendations: str
    visualization_types: list[str] = Field(default_factory=list)


ReportWriter = Callable[[FinancialReportInput], FinancialReportOutput | Mapping[str, Any]]


def format_amount(value: float) -> str:
    """Thousands-separated amount with at most three decimals (``1,234.5``)."""
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def financial_data_summary(totals: Totals, currency: str = DEFAULT_CURRENCY) -> str:
    """Render the year totals as the bullet list the report writer expects.

    Args:
        totals: Year totals.
        currency: Label appended to every amount.
    """
    def money(value: float) -> str:
        return f"{format_amount(value)} {currency}"

    outcome = "Profit" if totals.net_profit >= 0 else "Loss"
    lines = [
        f"- Total Students: {totals.student_count}",
        f"- Total Subscription Income: {money(totals.subscriptions)}",
        f"- Total Donations: {money(totals.donations)}",
        f"- Total Income: {money(totals.income)}",
        f"- Total Expenses (Salaries + General): {money(totals.expenses)}",
        f"  - Salaries: {money(totals.salaries)}",
        f"  - General Expenses: {money(totals.general_expenses)}",
        f"- Net Profit/Loss: {money(totals.net_profit)} ({outcome})",
    ]
    return "\n".join(lines)


def build_report_input(
    aggregate: FinancialAggregate,
    report_type: ReportType = "annual",
    currency: str = DEFAULT_CURRENCY,
    school_name: str = DEFAULT_SCHOOL_NAME,
) -> FinancialReportInput:
    """Build the writer request for `aggregate`."""
    return FinancialReportInput(
        report_type=report_type,
        financial_data_summary=financial_data_summary(aggregate.totals, currency),
        school_name=school_name,
    )


def generate_report(
    aggregate: FinancialAggregate,
    report_type: ReportType,
    writer: ReportWriter,
    currency: str = DEFAULT_CURRENCY,
    school_name: str = DEFAULT_SCHOOL_NAME,
) -> FinancialReportOutput:
    """Ask `writer` for a report on `aggregate` and validate its answer.

    Args:
        aggregate: Aggregate to report on.
        report_type: ``"monthly"`` or ``"annual"``.
        writer: Callable taking a `FinancialReportInput` and returning a
            `FinancialReportOutput` or an equivalent mapping.
        currency: Currency label for the summary text.
        school_name: School name passed to the writer.

    Raises:
        pydantic.ValidationError: if the writer's answer is malformed.
        Exception: anything the writer raises, after logging it.
    """
    request = build_report_input(aggregate, report_type, currency, school_name)
    log.info("Requesting %s report", report_type)
    try:
        answer = writer(request)
    except Exception:
        log.exception("Report writer failed for %s report", report_type)
        raise

    if isinstance(answer, FinancialReportOutput):
        return answer
    return FinancialReportOutput.model_validate(answer)
