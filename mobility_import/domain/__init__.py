"""Domain models for mobility records and the form field store."""

from .models import DEFAULT_FORM_DATA, FieldKey, FieldStore, MobilityForm, MobilityType

__all__ = [
    "FieldKey",
    "MobilityType",
    "FieldStore",
    "MobilityForm",
    "DEFAULT_FORM_DATA",
]
