"""Matching of source headers and values against configured vocabularies.

This module provides:
- build_field_mapping: Maps CSV headers to canonical field keys via a synonym table
- match_option: Matches free text against a closed list of display options
"""

from .headers import build_field_mapping
from .options import match_option

__all__ = [
    "build_field_mapping",
    "match_option",
]
