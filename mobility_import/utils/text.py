"""Accent and case folding used for header and value comparisons.

Comparison keys are only ever used to decide *whether* two strings match.
They are never written to the field store.
"""

import unicodedata


def fold_accents(text: str) -> str:
    """Remove diacritical marks from text.

    Applies canonical decomposition (NFD) and drops every combining mark,
    so "Ubicación" becomes "Ubicacion". Case is left untouched.

    Args:
        text: Text to fold

    Returns:
        Text without combining marks (empty string for empty input)

    Example:
        >>> fold_accents("Delegación")
        'Delegacion'
    """
    if not text:
        return ""

    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_key(text: str) -> str:
    """Build the comparison key for a header, alias, or cell value.

    Trims surrounding whitespace, lowercases, and folds accents.

    Example:
        >>> normalize_key("  Fecha Inicio ")
        'fecha inicio'
    """
    if not text:
        return ""
    return fold_accents(text.strip().lower())
