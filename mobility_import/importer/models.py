"""Data models for the import orchestrator.

This module defines how each canonical field is transformed (its kind) and
the result returned to the form layer after an import.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from mobility_import.domain.models import FieldKey


class FieldKind(str, Enum):
    """How a CSV cell is turned into a field value."""

    DATE = "date"
    OPTION = "option"
    MOBILITY_TYPE = "mobility_type"
    TEXT = "text"


@dataclass(frozen=True)
class FieldSpec:
    """Transform declaration for one canonical field.

    Attributes:
        kind: Transform applied to the raw cell
        label: Human-readable name used in warnings
    """

    kind: FieldKind
    label: str


TEXT_FIELD = FieldSpec(FieldKind.TEXT, "text")

FIELD_SPECS: Dict[str, FieldSpec] = {
    FieldKey.START_DATE.value: FieldSpec(FieldKind.DATE, "date"),
    FieldKey.END_DATE.value: FieldSpec(FieldKind.DATE, "date"),
    FieldKey.TEMPORARY_POSITION.value: FieldSpec(FieldKind.OPTION, "position"),
    FieldKey.ORIGINAL_POSITION.value: FieldSpec(FieldKind.OPTION, "position"),
    FieldKey.HRBP.value: FieldSpec(FieldKind.OPTION, "HRBP"),
    FieldKey.MOBILITY_TYPE.value: FieldSpec(FieldKind.MOBILITY_TYPE, "mobility type"),
    FieldKey.LOCATION.value: TEXT_FIELD,
    FieldKey.FULL_NAME.value: TEXT_FIELD,
    FieldKey.GPID.value: TEXT_FIELD,
}


@dataclass
class ImportResult:
    """Outcome of one CSV import.

    ``success`` is False only when nothing could be imported at all (the
    source was unreadable or had no data rows). Per-field problems leave it
    True and are reported in ``warnings``.

    Attributes:
        success: Whether the file was read and had a data row
        fields_imported: Number of fields written to the store
        warnings: Human-readable warnings, in field order
        field_warnings: First warning per field, keyed by field key
    """

    success: bool
    fields_imported: int = 0
    warnings: List[str] = field(default_factory=list)
    field_warnings: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def failure(cls, message: str) -> "ImportResult":
        """Whole-call failure: nothing imported, one warning."""
        return cls(success=False, fields_imported=0, warnings=[message])

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the ``{success, fields_imported, warnings}`` contract."""
        return {
            "success": self.success,
            "fields_imported": self.fields_imported,
            "warnings": list(self.warnings),
        }
