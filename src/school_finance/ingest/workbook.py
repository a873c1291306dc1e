"""Read the annual workbook and write blank templates.

The reader uses pandas (openpyxl engine) and returns plain row dicts with
blank cells as ``None``; fully blank rows are dropped. Date-formatted cells
arrive as timestamps, numbers as numbers, everything else as typed in.
The phone column is always read as text.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pandas as pd

from school_finance import columns as col
from school_finance.aggregate.calendar import DEFAULT_CALENDAR
from school_finance.ingest.records import workbook_from_sheets
from school_finance.models import WorkbookData

log = logging.getLogger(__name__)

SHEETS = (col.STUDENTS_SHEET, col.SALARIES_SHEET, col.DONORS_SHEET, col.EXPENSES_SHEET)


def frame_to_rows(pdf: pd.DataFrame) -> list[dict[str, Any]]:
    """Convert a sheet DataFrame to row dicts, NaN/NaT → None.

    Args:
        pdf: DataFrame as returned by `pd.read_excel`.

    Returns:
        List of row dicts keyed by column label, fully blank rows removed.
    """
    pdf = pdf.dropna(how="all")
    if pdf.empty:
        return []
    pdf = pdf.astype(object).where(pd.notna(pdf), None)
    return pdf.to_dict(orient="records")


def read_workbook_rows(path: Path) -> dict[str, list[dict[str, Any]]]:
    """Read the four expected sheets of `path` into raw rows.

    A missing sheet is logged and treated as empty.

    Raises:
        FileNotFoundError: if `path` does not exist.
    """
    # phone numbers keep their leading zero
    frames = pd.read_excel(
        path, sheet_name=None, engine="openpyxl", dtype={col.PHONE: str}
    )

    sheets: dict[str, list[dict[str, Any]]] = {}
    for name in SHEETS:
        if name not in frames:
            log.warning("Sheet %r not found in %s. Treating it as empty.", name, path)
            sheets[name] = []
            continue
        sheets[name] = frame_to_rows(frames[name])
        log.info("Read sheet %r: %d rows", name, len(sheets[name]))

    return sheets


def load_workbook(path: Path) -> WorkbookData:
    """Read `path` and return typed records for all four sheets."""
    return workbook_from_sheets(read_workbook_rows(path))


def template_frames() -> dict[str, pd.DataFrame]:
    """Return the template sheets: exact headers plus one example row each."""
    salary_headers = [col.FULL_NAME, col.ROLE] + [
        DEFAULT_CALENDAR.salary_column(m) for m in DEFAULT_CALENDAR.months
    ]
    return {
        col.STUDENTS_SHEET: pd.DataFrame(
            [["أحمد بوحاج", "ذكر", "2 متوسط", "فوج 3", "الشيخ أحمد بن عمر",
              2500, 0, 2500, 2500, "تأخر فصل"]],
            columns=col.STUDENT_HEADERS,
        ),
        col.SALARIES_SHEET: pd.DataFrame(
            [["الشيخ صهيب نصيب", "شيخ"] + [5000] * len(DEFAULT_CALENDAR.months)],
            columns=salary_headers,
        ),
        col.DONORS_SHEET: pd.DataFrame(
            [["عبد القادر حميدي", "0694123456", 30000, "15/02/2024", "دعم موسم الشتاء"]],
            columns=col.DONOR_HEADERS,
        ),
        col.EXPENSES_SHEET: pd.DataFrame(
            [["إصلاح مكيف فوج 2", 12000, "10/03/2024", "صيانة", "دورة الصيف"]],
            columns=col.EXPENSE_HEADERS,
        ),
    }


def write_template(path: Path) -> Path:
    """Write a blank annual workbook template to `path`.

    Returns:
        The written path.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        for name, frame in template_frames().items():
            frame.to_excel(writer, sheet_name=name, index=False)

    log.info("Template written: %s", path)
    return path
