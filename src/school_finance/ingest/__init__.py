"""Workbook ingestion.

Reads the four sheets of the annual workbook into raw rows and turns them
into typed records. Coercion of loosely-typed cells happens here, once.
"""
