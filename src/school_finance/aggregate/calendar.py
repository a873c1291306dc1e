"""Fixed month and season tables shared by the aggregation stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from school_finance import columns as col

MONTHS = (
    "جانفي", "فيفري", "مارس", "أفريل", "ماي", "جوان",
    "جويلية", "أوت", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر",
)

# The first salary column carries a "شهر " prefix the other eleven lack.
SALARY_MONTH_COLUMNS = MappingProxyType({
    MONTHS[0]: "شهر " + MONTHS[0],
    **{m: m for m in MONTHS[1:]},
})

MONTHS_PER_SEASON = 3


@dataclass(frozen=True)
class CalendarConfig:
    """Canonical ordering of months and seasons.

    Attributes:
        months: Twelve month labels in calendar order.
        seasons: Four season labels; season ``i`` covers months ``3i .. 3i+2``.
        salary_columns: Month label -> salary sheet column holding that month.
    """
    months: tuple[str, ...] = MONTHS
    seasons: tuple[str, ...] = col.SEASON_COLUMNS
    salary_columns: Mapping[str, str] = field(default_factory=lambda: SALARY_MONTH_COLUMNS)

    def salary_column(self, month: str) -> str:
        return self.salary_columns.get(month, month)

    @staticmethod
    def season_of(month_index: int) -> int:
        """Return the season index (0-3) of a month index (0-11)."""
        return month_index // MONTHS_PER_SEASON


DEFAULT_CALENDAR = CalendarConfig()
