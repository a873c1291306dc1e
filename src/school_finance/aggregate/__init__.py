"""Aggregation stages.

Each module is a pure reduction over typed workbook records; `build` wires
them into the full `FinancialAggregate`. Stages share only the immutable
calendar tables in `calendar`.
"""
