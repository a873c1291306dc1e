from __future__ import annotations

from school_finance.aggregate.totals import (
    compute_totals,
    group_income,
    seasonal_subscriptions,
    total_salaries,
    unpaid_seasons,
)
from school_finance.models import StaffSalary, Student, WorkbookData


def test_single_student_with_one_unpaid_season() -> None:
    student = Student(full_name="أحمد", teacher="T", seasons=(2500, 0, 2500, 2500))
    unpaid = unpaid_seasons([student])
    assert len(unpaid) == 1
    assert unpaid[0].season == "الموسم 2"
    assert unpaid[0].season_index == 1
    assert unpaid[0].teacher == "T"

    totals = compute_totals(WorkbookData(students=[student]))
    assert totals.subscriptions == 7500.0
    assert totals.student_count == 1


def test_negative_amount_counts_as_paid() -> None:
    student = Student(seasons=(-500, 0, 0, 0))
    assert [u.season_index for u in unpaid_seasons([student])] == [1, 2, 3]


def test_group_income_skips_students_without_teacher() -> None:
    students = [
        Student(teacher="T2", seasons=(100, 0, 0, 0)),
        Student(teacher="T1", seasons=(100, 100, 0, 0)),
        Student(teacher=None, seasons=(999, 0, 0, 0)),
        Student(teacher="T2", seasons=(0, 0, 0, 50)),
    ]
    income = group_income(students)
    assert income == {"T2": 150.0, "T1": 200.0}
    assert list(income) == ["T2", "T1"]


def test_teacher_with_only_unpaid_students_is_listed_with_zero() -> None:
    assert group_income([Student(teacher="T", seasons=(0, 0, 0, 0))]) == {"T": 0.0}


def test_duplicate_students_are_not_merged() -> None:
    students = [Student(full_name="x", seasons=(1, 1, 1, 0))] * 2
    assert seasonal_subscriptions(students) == [2.0, 2.0, 2.0, 0.0]
    assert len(unpaid_seasons(students)) == 2


def test_total_salaries_includes_extra_columns() -> None:
    staff = [
        StaffSalary(full_name="a", amounts={"شهر جانفي": 5000, "منحة": 1000}),
        StaffSalary(full_name="b", amounts={"فيفري": 4000}),
    ]
    assert total_salaries(staff) == 10000.0


def test_totals_identities(sample_data: WorkbookData) -> None:
    t = compute_totals(sample_data)
    assert t.student_count == 3
    assert t.subscriptions == 19500.0
    assert t.donations == 55000.0
    assert t.salaries == 60000.0
    assert t.general_expenses == 15500.0
    assert t.income == t.subscriptions + t.donations
    assert t.expenses == t.salaries + t.general_expenses
    assert t.net_profit == t.income - t.expenses == -1000.0
