"""Date normalization for CSV cells.

Spanish HR exports write dates day-first (28/08/2025, 28-08-2025,
28.08.2025) while the form stores ISO dates. Normalization is best-effort:
no calendar validation is done (31/02/2025 becomes 2025-02-31) and any
unrecognized shape is returned as-is so downstream validation can report
it with the original text.
"""

import re

# Day-month-year with "/", "-" or "." separators, 1-2 digit day and month
REGIONAL_DATE_PATTERN = re.compile(r"(\d{1,2})[/\-.](\d{1,2})[/\-.](\d{4})", re.ASCII)


def normalize_date(raw: str) -> str:
    """Normalize a raw date string to YYYY-MM-DD.

    Rules, in order:
    1. Empty or blank input returns "".
    2. D/M/YYYY (any of "/", "-", ".") is reordered and zero-padded.
    3. Anything else, including a value already in YYYY-MM-DD form, is
       returned trimmed but otherwise unchanged.

    Args:
        raw: Date string as it appeared in the CSV

    Returns:
        ISO date string, the trimmed input, or "" for blank input

    Example:
        >>> normalize_date("1.8.2025")
        '2025-08-01'
    """
    if not raw or not raw.strip():
        return ""

    candidate = raw.strip()

    match = REGIONAL_DATE_PATTERN.fullmatch(candidate)
    if match:
        day, month, year = match.groups()
        return f"{year}-{month.zfill(2)}-{day.zfill(2)}"

    return candidate
