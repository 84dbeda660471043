"""Test helper utilities."""

from .sources import AsyncSource, FailingSource, csv_source, run_import

__all__ = ["AsyncSource", "FailingSource", "csv_source", "run_import"]
