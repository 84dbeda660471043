"""Mobility CSV import core.

Maps loosely specified HR CSV exports onto the fixed mobility form schema.
"""

__version__ = "0.1.0"
