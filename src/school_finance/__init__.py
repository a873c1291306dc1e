"""school_finance package.

Turns the annual finance workbook of a school (students, staff salaries,
donors, general expenses) into the aggregated metrics used by dashboards and
report generators.

Architecture:
- Workbook → raw rows → typed records (coercion happens once, at ingestion)
- Pure aggregation stages: dates → buckets → totals → series → risk
- Pydantic models describe both the records and the derived aggregate
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
