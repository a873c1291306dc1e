from __future__ import annotations

from typing import Any

import pytest

from school_finance.ingest.records import workbook_from_rows
from school_finance.models import WorkbookData

MONTH_COLUMNS = [
    "شهر جانفي", "فيفري", "مارس", "أفريل", "ماي", "جوان",
    "جويلية", "أوت", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر",
]


def student_row(name: str, teacher: str | None, seasons: list[Any]) -> dict[str, Any]:
    row: dict[str, Any] = {
        "الاسم الكامل": name,
        "الجنس": "ذكر",
        "المستوى": "2 متوسط",
        "الفوج": "فوج 3",
        "الشيخ/الأستاذة": teacher,
        "ملاحظات": None,
    }
    row.update({f"الموسم {i + 1}": v for i, v in enumerate(seasons)})
    return row


def salary_row(name: str, monthly: float, **extra: Any) -> dict[str, Any]:
    row: dict[str, Any] = {"الاسم الكامل": name, "الدور": "شيخ"}
    row.update({m: monthly for m in MONTH_COLUMNS})
    row.update(extra)
    return row


def donor_row(name: str, amount: Any, date: Any) -> dict[str, Any]:
    return {"الاسم الكامل": name, "رقم الهاتف": "0694123456", "المبلغ": amount,
            "التاريخ": date, "ملاحظة": None}


def expense_row(item: str, amount: Any, date: Any, kind: str | None) -> dict[str, Any]:
    return {"البيان": item, "المبلغ": amount, "التاريخ": date, "نوع المصروف": kind,
            "ملاحظة": None}


@pytest.fixture
def sample_rows() -> dict[str, list[dict[str, Any]]]:
    return {
        "students": [
            student_row("A", "T1", [2500, 0, 2500, 2500]),
            student_row("B", "T1", [3000, "3000", "", 3000]),
            student_row("C", "T2", ["abc", 1000, 1000, 1000]),
        ],
        "salaries": [salary_row("T1", 5000)],
        "donors": [
            donor_row("D1", 30000, "15/02/2024"),
            donor_row("D2", 20000, 45458),  # 2024-06-15
            donor_row("D3", "5000", "not a date"),
        ],
        "expenses": [
            expense_row("E1", 12000, "10/03/2024", "صيانة"),
            expense_row("E2", 3000, "2024-04-05", "كهرباء"),
            expense_row("E3", 500, "", "صيانة"),
        ],
    }


@pytest.fixture
def sample_data(sample_rows: dict[str, list[dict[str, Any]]]) -> WorkbookData:
    return workbook_from_rows(**sample_rows)
