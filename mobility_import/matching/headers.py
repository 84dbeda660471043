"""Header-to-field mapping against a synonym table."""

from typing import Dict, Iterable, List, Mapping, Tuple

from mobility_import.logging import get_logger
from mobility_import.utils.text import normalize_key

logger = get_logger(__name__, component="matching")


def build_field_mapping(
    headers: Iterable[str], synonym_table: Mapping[str, str]
) -> Dict[str, str]:
    """Map source headers to canonical field keys.

    Headers and aliases are compared as whole strings after trimming,
    lowercasing and accent folding. When several aliases match one header
    the first in table order wins. Headers without a match are left out;
    unrelated columns are expected in real exports.

    Args:
        headers: Header strings as they appear in the CSV
        synonym_table: Alias -> canonical field key

    Returns:
        Dict of original header -> field key, in header order

    Example:
        >>> build_field_mapping(["Ubicación"], {"ubicacion": "location"})
        {'Ubicación': 'location'}
    """
    aliases: List[Tuple[str, str]] = [
        (normalize_key(alias), field_key) for alias, field_key in synonym_table.items()
    ]

    mapping: Dict[str, str] = {}
    unmatched: List[str] = []
    for header in headers:
        normalized_header = normalize_key(header)
        for alias, field_key in aliases:
            if alias == normalized_header:
                mapping[header] = field_key
                break
        else:
            unmatched.append(header)

    if unmatched:
        logger.debug(
            "Ignoring unrecognized CSV headers",
            extra={
                "event": "matching.headers.unmatched",
                "unmatched_headers": unmatched,
            },
        )

    return mapping
