"""Secondary dashboard figures derived from a `FinancialAggregate`.

Everything here is computed from the aggregate (plus, for per-person views,
the typed records); nothing is stored.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal, Sequence

from school_finance.models import (
    RiskRadar,
    SeasonProfit,
    StaffSalary,
    Student,
)

SeasonStatus = Literal["excellent", "average", "balanced", "weak"]

# net profit floor -> status, checked top-down
SEASON_STATUS_LADDER: tuple[tuple[float, SeasonStatus], ...] = (
    (150_000.0, "excellent"),
    (50_000.0, "average"),
    (0.0, "balanced"),
)
HIGH_RISK_THRESHOLD = 70

# ratio shown when a season has income but no expenses
UNCOVERED_RATIO = 1000.0


@dataclass(frozen=True)
class SeasonCoverage:
    """How far a season's income covers its expenses.

    Attributes:
        name: Season label.
        income: Season income.
        expenses: Season expenses.
        ratio: income / expenses in percent.
    """
    name: str
    income: float
    expenses: float
    ratio: float

    @property
    def in_deficit(self) -> bool:
        return self.ratio < 100.0

    @property
    def deficit_pct(self) -> float:
        return 100.0 - self.ratio if self.in_deficit else 0.0


@dataclass(frozen=True)
class SeasonKpi:
    name: str
    income_change_pct: float | None
    expense_change_pct: float | None
    net_profit: float


@dataclass(frozen=True)
class StaffCoverage:
    """A staff member's annual salary against their group's income."""
    full_name: str | None
    role: str | None
    annual_salary: float
    group_income: float
    salary_to_income_pct: float


@dataclass(frozen=True)
class StudentPayments:
    full_name: str | None
    teacher: str | None
    total_paid: float
    paid_seasons: int


def coverage_ratio(income: float, expenses: float) -> float:
    if expenses > 0:
        return income / expenses * 100.0
    return UNCOVERED_RATIO if income > 0 else 100.0


def seasonal_coverage(seasons: Iterable[SeasonProfit]) -> list[SeasonCoverage]:
    """Coverage ratio for each season of the profit analysis."""
    return [
        SeasonCoverage(
            name=s.name,
            income=s.income,
            expenses=s.expenses,
            ratio=coverage_ratio(s.income, s.expenses),
        )
        for s in seasons
    ]


def deficit_seasons(coverage: Iterable[SeasonCoverage]) -> list[SeasonCoverage]:
    return [c for c in coverage if c.in_deficit]


def classify_season(net_profit: float) -> SeasonStatus:
    """Label a season by its net profit."""
    for floor, status in SEASON_STATUS_LADDER:
        if net_profit >= floor:
            return status
    return "weak"


def percent_change(current: float, previous: float | None) -> float | None:
    """Change from `previous` to `current` in percent; None without a usable base."""
    if previous is None or previous == 0:
        return None
    return (current - previous) / previous * 100.0


def seasonal_kpis(seasons: Sequence[SeasonProfit]) -> list[SeasonKpi]:
    """Season-over-season income and expense change, with each season's net profit."""
    kpis: list[SeasonKpi] = []
    for i, season in enumerate(seasons):
        prev = seasons[i - 1] if i > 0 else None
        kpis.append(
            SeasonKpi(
                name=season.name,
                income_change_pct=percent_change(season.income, prev.income if prev else None),
                expense_change_pct=percent_change(season.expenses, prev.expenses if prev else None),
                net_profit=season.net_profit,
            )
        )
    return kpis


def staff_coverage(
    salaries: Iterable[StaffSalary],
    group_income: dict[str, float],
) -> list[StaffCoverage]:
    """Compare each staff member's annual salary with their group's income.

    A staff row is matched to a group when its full name equals the teacher
    name on the students sheet. The ratio is rounded to one decimal and is 0
    when the group brought no income.
    """
    rows: list[StaffCoverage] = []
    for staff in salaries:
        salary = staff.annual_salary
        income = group_income.get(staff.full_name or "", 0.0)
        ratio = round(salary / income * 100.0, 1) if income > 0 else 0.0
        rows.append(
            StaffCoverage(
                full_name=staff.full_name,
                role=staff.role,
                annual_salary=salary,
                group_income=income,
                salary_to_income_pct=ratio,
            )
        )
    return rows


def student_payments(students: Iterable[Student]) -> list[StudentPayments]:
    return [
        StudentPayments(
            full_name=s.full_name,
            teacher=s.teacher,
            total_paid=s.total_paid,
            paid_seasons=s.paid_seasons,
        )
        for s in students
    ]


def is_high_risk(radar: RiskRadar, threshold: int = HIGH_RISK_THRESHOLD) -> bool:
    """True if any risk index is above `threshold`."""
    return any(
        score > threshold
        for score in (radar.source_dependence, radar.invoice_escalation, radar.donor_concentration)
    )
