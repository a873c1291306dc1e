"""Pydantic models for workbook records and the derived aggregate.

Input records are built from raw sheet rows keyed by the workbook's column
labels; numeric coercion happens here, once, so the aggregation stages only
ever see floats. Output models define the aggregate consumed by dashboards
and the report writer.
"""

from __future__ import annotations

import math
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from school_finance import columns as col
from school_finance.coerce import to_amount, to_text

_TEXT_FIELDS = ("full_name", "gender", "level", "group", "teacher", "role", "phone",
                "item", "expense_type", "notes")


def _clean_date_cell(value: Any) -> Any:
    if isinstance(value, float) and math.isnan(value):
        return None
    if isinstance(value, str):
        return value.strip() or None
    return value


class _Record(BaseModel):
    """Base for one workbook row; text cells are stripped, blanks become None."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator(*_TEXT_FIELDS, mode="before", check_fields=False)
    @classmethod
    def _coerce_text(cls, v: Any) -> str | None:
        return to_text(v)

    @field_validator("amount", mode="before", check_fields=False)
    @classmethod
    def _coerce_amount(cls, v: Any) -> float:
        return to_amount(v)

    @field_validator("date", mode="before", check_fields=False)
    @classmethod
    def _coerce_date(cls, v: Any) -> Any:
        return _clean_date_cell(v)


# =========================================================
# INPUT RECORDS
# =========================================================

class Student(_Record):
    """One row of the students sheet.

    Attributes:
        full_name: Student name (duplicates are allowed and never merged).
        gender: Free-text gender label.
        level: Study level.
        group: Group (class) label.
        teacher: Name of the teacher in charge of the group.
        seasons: Amount paid in each of the four seasons; 0 means unpaid.
        notes: Free-text notes.
    """
    full_name: str | None = None
    gender: str | None = None
    level: str | None = None
    group: str | None = None
    teacher: str | None = None
    seasons: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    notes: str | None = None

    @field_validator("seasons", mode="before")
    @classmethod
    def _seasons(cls, v: Any) -> tuple[float, ...]:
        values = [to_amount(x) for x in list(v or [])[: len(col.SEASON_COLUMNS)]]
        values += [0.0] * (len(col.SEASON_COLUMNS) - len(values))
        return tuple(values)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Student":
        return cls(
            full_name=row.get(col.FULL_NAME),
            gender=row.get(col.GENDER),
            level=row.get(col.LEVEL),
            group=row.get(col.GROUP),
            teacher=row.get(col.TEACHER),
            seasons=[row.get(key) for key in col.SEASON_COLUMNS],
            notes=row.get(col.NOTES),
        )

    @property
    def total_paid(self) -> float:
        return sum(self.seasons, 0.0)

    @property
    def paid_seasons(self) -> int:
        return sum(1 for amount in self.seasons if amount > 0)


class StaffSalary(_Record):
    """One row of the salaries sheet.

    Besides the name and role, every column of the row lands in `amounts`
    (the twelve month columns and any extra bonus/allowance column), and the
    annual salary is the sum over all of them.
    """
    full_name: str | None = None
    role: str | None = None
    amounts: dict[str, float] = Field(default_factory=dict)

    @field_validator("amounts", mode="before")
    @classmethod
    def _amounts(cls, v: Any) -> dict[str, float]:
        return {str(k): to_amount(x) for k, x in dict(v or {}).items()}

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "StaffSalary":
        extra = {k: v for k, v in row.items() if k not in (col.FULL_NAME, col.ROLE)}
        return cls(full_name=row.get(col.FULL_NAME), role=row.get(col.ROLE), amounts=extra)

    @property
    def annual_salary(self) -> float:
        return sum(self.amounts.values(), 0.0)

    def amount_for(self, column: str) -> float:
        return self.amounts.get(column, 0.0)


class Donor(_Record):
    """One row of the donors sheet. `date` keeps the raw cell shape."""
    full_name: str | None = None
    phone: str | None = None
    amount: float = 0.0
    date: Any = None
    notes: str | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Donor":
        return cls(
            full_name=row.get(col.FULL_NAME),
            phone=row.get(col.PHONE),
            amount=row.get(col.AMOUNT),
            date=row.get(col.DATE),
            notes=row.get(col.NOTE),
        )


class Expense(_Record):
    """One row of the general expenses sheet. `date` keeps the raw cell shape."""
    item: str | None = None
    amount: float = 0.0
    date: Any = None
    expense_type: str | None = None
    notes: str | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Expense":
        return cls(
            item=row.get(col.ITEM),
            amount=row.get(col.AMOUNT),
            date=row.get(col.DATE),
            expense_type=row.get(col.EXPENSE_TYPE),
            notes=row.get(col.NOTE),
        )


class WorkbookData(BaseModel):
    """The four record sets of one uploaded workbook."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    students: list[Student] = Field(default_factory=list)
    salaries: list[StaffSalary] = Field(default_factory=list)
    donors: list[Donor] = Field(default_factory=list)
    expenses: list[Expense] = Field(default_factory=list)


# =========================================================
# DERIVED AGGREGATE
# =========================================================

class _Derived(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class Totals(_Derived):
    """Year totals. `expenses`, `income` and `net_profit` are derived sums."""
    student_count: int = Field(..., ge=0)
    subscriptions: float
    donations: float
    salaries: float
    general_expenses: float
    expenses: float
    income: float
    net_profit: float


class UnpaidSeason(_Derived):
    """A student/season pair whose payment is exactly zero."""
    name: str | None
    season: str
    season_index: int = Field(..., ge=0, le=3)
    teacher: str | None


class MonthlyExpense(_Derived):
    month: str
    salaries: float
    general_expenses: float
    total: float


class SeasonPaymentStatus(_Derived):
    name: str
    paid: int = Field(..., ge=0)
    unpaid: int = Field(..., ge=0)


class SeasonIncome(_Derived):
    name: str
    subscriptions: float
    donations: float
    total: float


class SeasonProfit(_Derived):
    name: str
    income: float
    expenses: float
    net_profit: float


class RiskRadar(_Derived):
    """Heuristic 0-100 risk indices."""
    source_dependence: int = Field(..., ge=0, le=100)
    invoice_escalation: int = Field(..., ge=0, le=100)
    donor_concentration: int = Field(..., ge=0, le=100)


class FinancialAggregate(_Derived):
    """Everything derived from one workbook; recomputed wholesale on change.

    Sequence views are tuples of frozen models. `group_income` is a plain
    dict and is treated as read-only by every consumer.
    """
    totals: Totals
    unpaid_students: tuple[UnpaidSeason, ...]
    group_income: dict[str, float]
    monthly_expenses: tuple[MonthlyExpense, ...] = Field(..., min_length=12, max_length=12)
    seasonal_payment_status: tuple[SeasonPaymentStatus, ...] = Field(..., min_length=4, max_length=4)
    seasonal_income_analysis: tuple[SeasonIncome, ...] = Field(..., min_length=4, max_length=4)
    seasonal_analysis: tuple[SeasonProfit, ...] = Field(..., min_length=4, max_length=4)
    risk_radar: RiskRadar
