"""Core domain models for mobility records.

This module defines:
- FieldKey: canonical keys of the mobility form
- MobilityType: kinds of mobility event, with their display labels
- FieldStore: interface the importer writes through
- MobilityForm: in-memory field store used by the form layer and tests
"""

from enum import Enum
from typing import Dict, Optional, Protocol, runtime_checkable


class FieldKey(str, Enum):
    """Canonical field keys, independent of source header wording."""

    MOBILITY_TYPE = "mobility_type"
    START_DATE = "start_date"
    END_DATE = "end_date"
    LOCATION = "location"
    FULL_NAME = "full_name"
    GPID = "gpid"
    TEMPORARY_POSITION = "temporary_position"
    ORIGINAL_POSITION = "original_position"
    HRBP = "hrbp"


class MobilityType(str, Enum):
    """Kind of mobility event.

    A fixed-period mobility has both a start and an end date; the other two
    are open-ended.
    """

    START = "start"
    END = "end"
    FIXED_PERIOD = "fixed-period"

    @property
    def label(self) -> str:
        """Display label shown in the form."""
        return _MOBILITY_TYPE_LABELS[self]


_MOBILITY_TYPE_LABELS = {
    MobilityType.START: "Inicio de Movilidad",
    MobilityType.END: "Fin de Movilidad",
    MobilityType.FIXED_PERIOD: "Periodo Fijo",
}

DEFAULT_FORM_DATA: Dict[str, str] = {
    FieldKey.MOBILITY_TYPE.value: MobilityType.START.value,
    FieldKey.START_DATE.value: "",
    FieldKey.END_DATE.value: "",
    FieldKey.LOCATION.value: "",
    FieldKey.FULL_NAME.value: "",
    FieldKey.GPID.value: "",
    FieldKey.TEMPORARY_POSITION.value: "",
    FieldKey.ORIGINAL_POSITION.value: "",
    FieldKey.HRBP.value: "",
}


@runtime_checkable
class FieldStore(Protocol):
    """Mutable field store owned by the caller.

    The importer writes each accepted value through ``update_field`` as soon
    as it is resolved; it never reads from the store.
    """

    def update_field(self, key: str, value: str) -> None:
        ...


class MobilityForm:
    """In-memory mobility form state.

    Holds field values plus per-field error messages. Writing a field
    clears its error, mirroring how the form behaves when a user edits it.
    """

    def __init__(self, data: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(DEFAULT_FORM_DATA)
        if data:
            self.data.update(data)
        self.errors: Dict[str, str] = {}

    def update_field(self, key: str, value: str) -> None:
        """Set a field value and clear any error recorded for it."""
        key = key.value if isinstance(key, FieldKey) else key
        self.data[key] = value
        self.errors.pop(key, None)

    def set_error(self, key: str, message: str) -> None:
        """Record an error message against a field."""
        key = key.value if isinstance(key, FieldKey) else key
        self.errors[key] = message

    def reset(self) -> None:
        """Restore default values and clear all errors."""
        self.data = dict(DEFAULT_FORM_DATA)
        self.errors.clear()

    def as_dict(self) -> Dict[str, str]:
        """Return a copy of the current field values."""
        return dict(self.data)

    def __getitem__(self, key: str) -> str:
        key = key.value if isinstance(key, FieldKey) else key
        return self.data[key]
