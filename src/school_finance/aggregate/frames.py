"""Tabular views of a `FinancialAggregate`.

The aggregate is small, so every view is a plain pandas DataFrame built
eagerly. `export_series` writes them as CSV files for spreadsheet users.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import pandas as pd
from pydantic import BaseModel

from school_finance.models import FinancialAggregate

log = logging.getLogger(__name__)


def _records_frame(items: Sequence[BaseModel], columns: list[str]) -> pd.DataFrame:
    rows = [item.model_dump() for item in items]
    return pd.DataFrame(rows, columns=columns)


def series_frames(aggregate: FinancialAggregate) -> dict[str, pd.DataFrame]:
    """Return one DataFrame per aggregate view, keyed by a file-friendly name.

    Returns:
        Dict with keys `totals`, `monthly_expenses`, `seasonal_income`,
        `seasonal_analysis`, `seasonal_payment_status`, `unpaid_students`,
        `group_income` and `risk_radar`.
    """
    group = pd.DataFrame(
        list(aggregate.group_income.items()),
        columns=["teacher", "income"],
    )

    return {
        "totals": pd.DataFrame([aggregate.totals.model_dump()]),
        "monthly_expenses": _records_frame(
            aggregate.monthly_expenses,
            ["month", "salaries", "general_expenses", "total"],
        ),
        "seasonal_income": _records_frame(
            aggregate.seasonal_income_analysis,
            ["name", "subscriptions", "donations", "total"],
        ),
        "seasonal_analysis": _records_frame(
            aggregate.seasonal_analysis,
            ["name", "income", "expenses", "net_profit"],
        ),
        "seasonal_payment_status": _records_frame(
            aggregate.seasonal_payment_status,
            ["name", "paid", "unpaid"],
        ),
        "unpaid_students": _records_frame(
            aggregate.unpaid_students,
            ["name", "season", "season_index", "teacher"],
        ),
        "group_income": group,
        "risk_radar": pd.DataFrame([aggregate.risk_radar.model_dump()]),
    }


def export_series(aggregate: FinancialAggregate, out_dir: Path) -> list[Path]:
    """Write every aggregate view to `out_dir` as `<name>.csv`.

    Files are UTF-8 with a BOM so spreadsheet tools display the Arabic labels.

    Args:
        aggregate: Aggregate to export.
        out_dir: Target directory (created if missing).

    Returns:
        Paths of the written files.
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []

    for name, frame in series_frames(aggregate).items():
        path = out_dir / f"{name}.csv"
        frame.to_csv(path, index=False, encoding="utf-8-sig")
        written.append(path)

    log.info("Exported %d tables to %s", len(written), out_dir)
    return written
