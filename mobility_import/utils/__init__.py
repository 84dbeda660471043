"""Text helpers shared by every import component."""

from .text import fold_accents, normalize_key

__all__ = [
    "fold_accents",
    "normalize_key",
]
