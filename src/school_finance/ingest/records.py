"""Raw sheet rows → typed `WorkbookData`.

Rows are dicts keyed by the workbook's column labels, as produced by the
spreadsheet reader. Unknown columns are ignored (except on the salary sheet,
where they are part of the annual cost).
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from school_finance import columns as col
from school_finance.models import Donor, Expense, StaffSalary, Student, WorkbookData

log = logging.getLogger(__name__)

Row = Mapping[str, Any]


def workbook_from_rows(
    students: Iterable[Row] = (),
    salaries: Iterable[Row] = (),
    donors: Iterable[Row] = (),
    expenses: Iterable[Row] = (),
) -> WorkbookData:
    """Build typed records from the raw rows of each sheet.

    Args:
        students: Rows of the students sheet.
        salaries: Rows of the salaries sheet.
        donors: Rows of the donors sheet.
        expenses: Rows of the general expenses sheet.

    Returns:
        `WorkbookData` with one record per row, in sheet order.
    """
    data = WorkbookData(
        students=[Student.from_row(r) for r in students],
        salaries=[StaffSalary.from_row(r) for r in salaries],
        donors=[Donor.from_row(r) for r in donors],
        expenses=[Expense.from_row(r) for r in expenses],
    )
    log.debug(
        "Parsed rows: students=%d salaries=%d donors=%d expenses=%d",
        len(data.students),
        len(data.salaries),
        len(data.donors),
        len(data.expenses),
    )
    return data


def workbook_from_sheets(sheets: Mapping[str, Iterable[Row]]) -> WorkbookData:
    """Build `WorkbookData` from a sheet-name → rows mapping.

    Missing sheets count as empty.
    """
    return workbook_from_rows(
        students=sheets.get(col.STUDENTS_SHEET, ()),
        salaries=sheets.get(col.SALARIES_SHEET, ()),
        donors=sheets.get(col.DONORS_SHEET, ()),
        expenses=sheets.get(col.EXPENSES_SHEET, ()),
    )
