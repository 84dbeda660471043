"""CSV tokenizing for HR exports.

This module provides:
- parse_csv_text: Permissive tokenizer turning CSV text into header-keyed records
- read_source: Async reader turning a file-like byte source into text
- parse_csv_source: Convenience wrapper combining both
- SourceReadError: Raised when the underlying source cannot be read
"""

from .csv_tokenizer import parse_csv_text, split_rows
from .exceptions import SourceReadError
from .reader import parse_csv_source, read_source

__all__ = [
    "parse_csv_text",
    "split_rows",
    "read_source",
    "parse_csv_source",
    "SourceReadError",
]
