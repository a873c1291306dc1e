"""Command-line interface for the aggregation pipeline.

Provides subcommands: `summarize`, `export`, `report-input` and `template`.
Each command is implemented as a `cmd_*` function that accepts an argparse
namespace.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from school_finance.config import get_settings
from school_finance.logging_config import configure_logging
from school_finance.models import FinancialAggregate, WorkbookData

# INGEST
from school_finance.ingest.workbook import load_workbook, write_template

# AGGREGATE
from school_finance.aggregate.build import build_aggregate
from school_finance.aggregate.frames import export_series

# REPORT
from school_finance.report.insights import (
    classify_season,
    deficit_seasons,
    is_high_risk,
    seasonal_coverage,
    seasonal_kpis,
    staff_coverage,
    student_payments,
)
from school_finance.report.summary import build_report_input

log = logging.getLogger(__name__)


# --------------------------------------------------
# Helpers
# --------------------------------------------------
def _load(path: Path) -> tuple[WorkbookData, FinancialAggregate]:
    """Load a workbook and derive its aggregate."""
    data = load_workbook(path)
    return data, build_aggregate(data)


def _insights(data: WorkbookData, aggregate: FinancialAggregate) -> dict[str, Any]:
    coverage = seasonal_coverage(aggregate.seasonal_analysis)
    return {
        "seasonal_coverage": [asdict(c) for c in coverage],
        "deficit_seasons": [c.name for c in deficit_seasons(coverage)],
        "season_status": {
            s.name: classify_season(s.net_profit) for s in aggregate.seasonal_analysis
        },
        "seasonal_kpis": [asdict(k) for k in seasonal_kpis(aggregate.seasonal_analysis)],
        "staff_coverage": [
            asdict(s) for s in staff_coverage(data.salaries, aggregate.group_income)
        ],
        "student_payments": [asdict(s) for s in student_payments(data.students)],
        "high_risk": is_high_risk(aggregate.risk_radar),
    }


def _emit(payload: str, out: Path | None) -> None:
    if out is None:
        sys.stdout.write(payload + "\n")
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(payload, encoding="utf-8")
    log.info("Wrote %s", out)


# --------------------------------------------------
# COMMANDS
# --------------------------------------------------
def cmd_summarize(args: argparse.Namespace) -> None:
    """Print (or write) the aggregate of a workbook as JSON.

    Args:
        args: argparse namespace with `workbook`, `out`, `insights`.
    """
    data, aggregate = _load(args.workbook)
    payload: dict[str, Any] = aggregate.model_dump(mode="json")
    if args.insights:
        payload["insights"] = _insights(data, aggregate)
    _emit(json.dumps(payload, ensure_ascii=False, indent=2), args.out)


def cmd_export(args: argparse.Namespace) -> None:
    """Write every aggregate view of a workbook as CSV files."""
    _, aggregate = _load(args.workbook)
    out_dir = args.out_dir or get_settings().export_dir
    export_series(aggregate, out_dir)


def cmd_report_input(args: argparse.Namespace) -> None:
    """Print the request that would be sent to the report writer."""
    s = get_settings()
    _, aggregate = _load(args.workbook)
    request = build_report_input(aggregate, args.type, s.currency, s.school_name)
    _emit(request.model_dump_json(indent=2), args.out)


def cmd_template(args: argparse.Namespace) -> None:
    """Write a blank annual workbook template."""
    write_template(args.path)


# --------------------------------------------------
# CLI
# --------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    p = argparse.ArgumentParser(prog="school-finance")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_sum = sub.add_parser("summarize")
    p_sum.add_argument("workbook", type=Path)
    p_sum.add_argument("--out", type=Path, default=None)
    p_sum.add_argument("--insights", action="store_true")

    p_export = sub.add_parser("export")
    p_export.add_argument("workbook", type=Path)
    p_export.add_argument("--out-dir", type=Path, default=None)

    p_report = sub.add_parser("report-input")
    p_report.add_argument("workbook", type=Path)
    p_report.add_argument("--type", choices=["monthly", "annual"], default="annual")
    p_report.add_argument("--out", type=Path, default=None)

    p_template = sub.add_parser("template")
    p_template.add_argument("path", type=Path)

    return p


def main() -> None:
    """CLI entry point: parse args, configure logging and dispatch commands."""
    load_dotenv()
    configure_logging(get_settings().log_path)

    args = build_parser().parse_args()

    if args.cmd == "summarize":
        cmd_summarize(args)
    elif args.cmd == "export":
        cmd_export(args)
    elif args.cmd == "report-input":
        cmd_report_input(args)
    elif args.cmd == "template":
        cmd_template(args)
    else:
        raise SystemExit(2)


if __name__ == "__main__":
    main()
