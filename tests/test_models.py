from __future__ import annotations

import pytest
from pydantic import ValidationError

from school_finance.models import Donor, Expense, RiskRadar, StaffSalary, Student, Totals


def test_student_from_row_coerces_season_amounts() -> None:
    s = Student.from_row({
        "الاسم الكامل": " أحمد ",
        "الشيخ/الأستاذة": "الشيخ أحمد",
        "الموسم 1": "2500",
        "الموسم 2": None,
        "الموسم 3": "x",
        "الموسم 4": 2500,
        "عمود غير معروف": "ignored",
    })
    assert s.full_name == "أحمد"
    assert s.teacher == "الشيخ أحمد"
    assert s.seasons == (2500.0, 0.0, 0.0, 2500.0)
    assert s.total_paid == 5000.0
    assert s.paid_seasons == 2


def test_student_missing_season_columns_are_unpaid() -> None:
    s = Student.from_row({"الاسم الكامل": "x"})
    assert s.seasons == (0.0, 0.0, 0.0, 0.0)
    assert s.teacher is None


def test_staff_salary_keeps_every_extra_column() -> None:
    staff = StaffSalary.from_row({
        "الاسم الكامل": "T1",
        "الدور": "شيخ",
        "شهر جانفي": 5000,
        "فيفري": "5000",
        "منحة": 1000,
        "ملاحظة": "text counts as zero",
    })
    assert staff.role == "شيخ"
    assert staff.annual_salary == 11000.0
    assert staff.amount_for("شهر جانفي") == 5000.0
    assert staff.amount_for("مارس") == 0.0
    assert "الاسم الكامل" not in staff.amounts


def test_donor_and_expense_keep_raw_date_shape() -> None:
    d = Donor.from_row({"المبلغ": "30000", "التاريخ": " 15/02/2024 "})
    e = Expense.from_row({"المبلغ": None, "التاريخ": 45000, "نوع المصروف": "صيانة"})
    assert d.amount == 30000.0
    assert d.date == "15/02/2024"
    assert e.amount == 0.0
    assert e.date == 45000
    assert e.expense_type == "صيانة"


def test_records_are_frozen() -> None:
    s = Student(full_name="x")
    with pytest.raises(ValidationError):
        s.full_name = "y"  # type: ignore[misc]


def test_risk_radar_rejects_out_of_range_scores() -> None:
    with pytest.raises(ValidationError):
        RiskRadar(source_dependence=120, invoice_escalation=0, donor_concentration=10)


def test_totals_rejects_negative_student_count() -> None:
    with pytest.raises(ValidationError):
        Totals(student_count=-1, subscriptions=0, donations=0, salaries=0,
               general_expenses=0, expenses=0, income=0, net_profit=0)
