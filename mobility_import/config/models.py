"""Configuration schema models using Pydantic."""

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field, field_validator

from mobility_import.domain.models import FieldKey, MobilityType

from . import defaults


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True}


def _clean_options(options: List[str], field_name: str) -> List[str]:
    cleaned = []
    for option in options:
        stripped = option.strip()
        if not stripped:
            raise ValueError(f"{field_name} cannot contain empty or whitespace-only options")
        cleaned.append(stripped)
    if not cleaned:
        raise ValueError(f"{field_name} must list at least one option")
    return cleaned


class ImportConfig(BaseModel):
    """Vocabularies the importer maps CSV headers and values against.

    Alias tables are kept in the order given; order decides which alias
    wins when two normalize to the same string. Option lists are kept in
    order too, since the first qualifying option wins a fuzzy match.
    """

    field_aliases: Dict[str, str] = Field(
        default_factory=lambda: dict(defaults.FIELD_ALIASES),
        description="Source header alias -> canonical field key",
    )
    mobility_type_aliases: Dict[str, str] = Field(
        default_factory=lambda: dict(defaults.MOBILITY_TYPE_ALIASES),
        description="Mobility type value alias -> mobility type code",
    )
    position_options: List[str] = Field(
        default_factory=lambda: list(defaults.POSITION_OPTIONS),
        description="Valid position titles for temporary and original position",
    )
    hrbp_options: List[str] = Field(
        default_factory=lambda: list(defaults.HRBP_OPTIONS),
        description="Valid HR business partner names",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    @field_validator("field_aliases")
    @classmethod
    def validate_field_aliases(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Lowercase alias keys (first one wins) and reject unknown field keys."""
        valid_keys = {key.value for key in FieldKey}
        validated = {}
        for alias, field_key in v.items():
            stripped = alias.strip().lower()
            if not stripped:
                raise ValueError("Field aliases cannot be empty or whitespace-only")
            if field_key not in valid_keys:
                raise ValueError(
                    f"Alias '{alias}' maps to unknown field '{field_key}'. "
                    f"Valid fields: {', '.join(sorted(valid_keys))}"
                )
            # First spelling wins when keys differ only by case
            validated.setdefault(stripped, field_key)
        return validated

    @field_validator("mobility_type_aliases")
    @classmethod
    def validate_mobility_type_aliases(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Lowercase alias keys (first one wins) and reject unknown mobility type codes."""
        valid_codes = {mobility_type.value for mobility_type in MobilityType}
        validated = {}
        for alias, code in v.items():
            stripped = alias.strip().lower()
            if not stripped:
                raise ValueError("Mobility type aliases cannot be empty or whitespace-only")
            if code not in valid_codes:
                raise ValueError(
                    f"Mobility type alias '{alias}' maps to unknown code '{code}'. "
                    f"Valid codes: {', '.join(sorted(valid_codes))}"
                )
            validated.setdefault(stripped, code)
        return validated

    @field_validator("position_options")
    @classmethod
    def validate_position_options(cls, v: List[str]) -> List[str]:
        return _clean_options(v, "position_options")

    @field_validator("hrbp_options")
    @classmethod
    def validate_hrbp_options(cls, v: List[str]) -> List[str]:
        return _clean_options(v, "hrbp_options")

    def option_lists(self) -> Dict[str, List[str]]:
        """Option list per enumerated field key."""
        return {
            FieldKey.TEMPORARY_POSITION.value: self.position_options,
            FieldKey.ORIGINAL_POSITION.value: self.position_options,
            FieldKey.HRBP.value: self.hrbp_options,
        }
