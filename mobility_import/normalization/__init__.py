"""Value normalization for imported cells.

This module provides:
- normalize_date: Converts regional numeric dates to ISO YYYY-MM-DD
"""

from .dates import REGIONAL_DATE_PATTERN, normalize_date

__all__ = [
    "normalize_date",
    "REGIONAL_DATE_PATTERN",
]
