"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads the environment (and the project `.env`) for presentation and output
options. Calendar tables are not settings; see `aggregate.calendar`.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os

from dotenv import load_dotenv

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")

DEFAULT_CURRENCY = "DZD"
DEFAULT_SCHOOL_NAME = "Al-Shafi'i Quranic School"


@dataclass(frozen=True)
class Settings:
    """Container for pipeline configuration read from the environment.

    Attributes:
        currency: Currency label appended to amounts in text summaries.
        school_name: School name handed to the report writer.
        log_path: File the CLI writes its log to.
        export_dir: Default output directory for CSV series exports.
    """
    currency: str
    school_name: str
    log_path: Path
    export_dir: Path


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if `SCHOOL_FINANCE_CURRENCY` is set but blank.
    """
    currency = os.getenv("SCHOOL_FINANCE_CURRENCY", DEFAULT_CURRENCY).strip()
    school_name = os.getenv("SCHOOL_FINANCE_SCHOOL_NAME", DEFAULT_SCHOOL_NAME).strip()
    log_path = Path(os.getenv("SCHOOL_FINANCE_LOG_PATH", "logs/school_finance.log"))
    export_dir = Path(os.getenv("SCHOOL_FINANCE_EXPORT_DIR", "data/exports"))

    if not currency:
        raise RuntimeError(
            "SCHOOL_FINANCE_CURRENCY must not be blank. Unset it to use "
            f"the default ({DEFAULT_CURRENCY!r})."
        )

    return Settings(
        currency=currency,
        school_name=school_name or DEFAULT_SCHOOL_NAME,
        log_path=log_path,
        export_dir=export_dir,
    )
