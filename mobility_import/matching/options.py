"""Fuzzy matching of free-text values against closed option lists.

Used for positions and HRBP names, where the CSV rarely carries the exact
display string (e.g. "conductor" for "Delivery Driver (Conductor)").
"""

from typing import Sequence

from mobility_import.utils.text import normalize_key


def match_option(raw: str, options: Sequence[str]) -> str:
    """Match a raw value against a list of display options.

    Two passes over ``options``, both in list order:
    1. exact match of the normalized forms
    2. substring match in either direction (option within value, or value
       within option)

    The first qualifying option wins, so list order decides ties. No match
    returns "" rather than a guess.

    Args:
        raw: Value as it appeared in the CSV
        options: Valid display strings

    Returns:
        The matching option exactly as listed, or ""

    Example:
        >>> match_option("conductor", ["Delivery Driver (Conductor)"])
        'Delivery Driver (Conductor)'
    """
    if not raw or not raw.strip():
        return ""

    value = normalize_key(raw)
    normalized_options = [(option, normalize_key(option)) for option in options]

    for option, normalized in normalized_options:
        if normalized == value:
            return option

    for option, normalized in normalized_options:
        if not normalized:
            continue
        if normalized in value or value in normalized:
            return option

    return ""
