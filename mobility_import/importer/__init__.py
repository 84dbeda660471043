"""Import orchestration: CSV source to mobility form fields.

This module provides:
- MobilityImporter: Service importing one CSV record into a field store
- import_record: Functional wrapper using explicit or built-in vocabularies
- ImportResult: Outcome returned to the form layer
- FieldKind / FieldSpec / FIELD_SPECS: Per-field transform declarations
"""

from .models import FIELD_SPECS, FieldKind, FieldSpec, ImportResult
from .service import NO_DATA_WARNING, MobilityImporter, import_record

__all__ = [
    "MobilityImporter",
    "import_record",
    "ImportResult",
    "FieldKind",
    "FieldSpec",
    "FIELD_SPECS",
    "NO_DATA_WARNING",
]
