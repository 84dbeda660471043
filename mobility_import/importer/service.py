"""CSV import orchestration for the mobility form.

This module implements the import flow:
1. Read and tokenize the CSV source
2. Take the first data record (one person, one mobility event per import)
3. Map its headers to canonical field keys
4. Transform each mapped cell according to its field kind
5. Write accepted values to the caller's field store, collecting warnings
"""

import logging
import uuid
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from mobility_import.config import defaults
from mobility_import.config.models import ImportConfig
from mobility_import.domain.models import FieldStore
from mobility_import.logging import get_logger
from mobility_import.logging.context import log_context
from mobility_import.matching import build_field_mapping, match_option
from mobility_import.normalization import normalize_date
from mobility_import.parsing import SourceReadError, parse_csv_source
from mobility_import.utils.text import normalize_key

from .models import FIELD_SPECS, TEXT_FIELD, FieldKind, FieldSpec, ImportResult

logger = get_logger(__name__, component="importer")

NO_DATA_WARNING = "No data found in the CSV file"


class MobilityImporter:
    """Imports one mobility record from a CSV source into a field store.

    Responsibilities:
    - Map CSV headers to field keys via the synonym table
    - Normalize dates and match enumerated values to their canonical options
    - Translate mobility type labels to codes
    - Write each accepted value immediately; report the rest as warnings

    The importer holds only read-only configuration, so one instance may
    serve any number of imports. Imports into the same store must be
    serialized by the caller.
    """

    def __init__(
        self,
        field_aliases: Optional[Mapping[str, str]] = None,
        option_lists: Optional[Mapping[str, Sequence[str]]] = None,
        mobility_type_aliases: Optional[Mapping[str, str]] = None,
        field_specs: Optional[Mapping[str, FieldSpec]] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize MobilityImporter.

        Args:
            field_aliases: Header alias -> field key (defaults to the built-in table)
            option_lists: Field key -> valid options for OPTION fields
                (defaults to the built-in position and HRBP lists)
            mobility_type_aliases: Value alias -> mobility type code
                (defaults to the built-in table)
            field_specs: Field key -> FieldSpec (defaults to FIELD_SPECS)
            logger_instance: Logger instance (defaults to module logger)
        """
        self.field_aliases = (
            field_aliases if field_aliases is not None else defaults.FIELD_ALIASES
        )
        self.option_lists = (
            option_lists if option_lists is not None else ImportConfig().option_lists()
        )
        self.field_specs = field_specs if field_specs is not None else FIELD_SPECS
        self.logger = logger_instance or logger

        # First alias in table order wins when two fold to the same key
        self._mobility_type_lookup: Dict[str, str] = {}
        aliases = (
            mobility_type_aliases
            if mobility_type_aliases is not None
            else defaults.MOBILITY_TYPE_ALIASES
        )
        for alias, code in aliases.items():
            self._mobility_type_lookup.setdefault(normalize_key(alias), code)

        self._transforms: Dict[FieldKind, Callable[[str, str], Optional[str]]] = {
            FieldKind.DATE: self._transform_date,
            FieldKind.OPTION: self._transform_option,
            FieldKind.MOBILITY_TYPE: self._transform_mobility_type,
            FieldKind.TEXT: self._transform_text,
        }

    @classmethod
    def from_config(cls, config: ImportConfig, **kwargs) -> "MobilityImporter":
        """Build an importer from a validated ImportConfig."""
        return cls(
            field_aliases=config.field_aliases,
            option_lists=config.option_lists(),
            mobility_type_aliases=config.mobility_type_aliases,
            **kwargs,
        )

    async def import_record(self, source: Any, store: FieldStore) -> ImportResult:
        """Import the first data row of a CSV source into a field store.

        Reading the source is the only await; everything after it runs
        synchronously.

        Args:
            source: File-like object with a sync or async ``read()``
            store: Field store receiving accepted values

        Returns:
            ImportResult. Read failures and files without data rows yield
            ``success=False``; per-field problems are warnings only.
        """
        source_name = str(getattr(source, "name", "") or "")

        with log_context(import_id=uuid.uuid4().hex[:12], source_name=source_name):
            self.logger.info(
                "CSV import started",
                extra={"event": "import.started"},
            )

            try:
                records = await parse_csv_source(source)
            except SourceReadError as e:
                self.logger.error(
                    f"CSV import failed: {e}",
                    extra={"event": "import.read_failed"},
                )
                return ImportResult.failure(str(e))

            if not records:
                self.logger.warning(
                    "CSV has no data rows",
                    extra={"event": "import.no_data"},
                )
                return ImportResult.failure(NO_DATA_WARNING)

            if len(records) > 1:
                self.logger.info(
                    f"CSV has {len(records)} data rows; importing the first only",
                    extra={"event": "import.extra_rows_ignored", "record_count": len(records)},
                )

            return self.apply_record(records[0], store)

    def apply_record(self, record: Mapping[str, str], store: FieldStore) -> ImportResult:
        """Map and transform one parsed record into the field store.

        Args:
            record: Header -> cell value for one CSV row
            store: Field store receiving accepted values

        Returns:
            ImportResult with success=True, the number of fields written and
            one warning per value that could not be interpreted
        """
        mapping = build_field_mapping(record.keys(), self.field_aliases)
        result = ImportResult(success=True)

        for header, field_key in mapping.items():
            raw_value = (record[header] or "").strip()
            if not raw_value:
                continue

            spec = self.field_specs.get(field_key, TEXT_FIELD)
            value = self._transforms[spec.kind](raw_value, field_key)

            if not value:
                warning = self._format_warning(spec, raw_value)
                result.warnings.append(warning)
                # Several headers may map to one field; the first warning is kept
                result.field_warnings.setdefault(field_key, warning)
                self.logger.warning(
                    warning,
                    extra={
                        "event": "import.field.unmatched",
                        "field": field_key,
                        "header": header,
                        "field_kind": spec.kind.value,
                    },
                )
                continue

            store.update_field(field_key, value)
            result.fields_imported += 1
            self.logger.debug(
                f"Imported field {field_key}",
                extra={
                    "event": "import.field.written",
                    "field": field_key,
                    "header": header,
                    "field_kind": spec.kind.value,
                },
            )

        self.logger.info(
            "CSV import completed",
            extra={
                "event": "import.completed",
                "mapped_headers": len(mapping),
                "fields_imported": result.fields_imported,
                "warning_count": len(result.warnings),
            },
        )
        return result

    def _transform_date(self, raw_value: str, field_key: str) -> Optional[str]:
        return normalize_date(raw_value) or None

    def _transform_option(self, raw_value: str, field_key: str) -> Optional[str]:
        options = self.option_lists.get(field_key, ())
        return match_option(raw_value, options) or None

    def _transform_mobility_type(self, raw_value: str, field_key: str) -> Optional[str]:
        # Unknown labels are kept verbatim for the form layer to flag
        return self._mobility_type_lookup.get(normalize_key(raw_value), raw_value)

    def _transform_text(self, raw_value: str, field_key: str) -> Optional[str]:
        return raw_value

    @staticmethod
    def _format_warning(spec: FieldSpec, raw_value: str) -> str:
        if spec.kind is FieldKind.DATE:
            return f'Could not parse date: "{raw_value}"'
        return f'No matching {spec.label} for: "{raw_value}"'


async def import_record(
    source: Any,
    store: FieldStore,
    synonym_table: Optional[Mapping[str, str]] = None,
    option_lists: Optional[Mapping[str, Sequence[str]]] = None,
    mobility_type_aliases: Optional[Mapping[str, str]] = None,
) -> ImportResult:
    """Import the first row of a CSV source using the given vocabularies.

    Convenience wrapper around MobilityImporter; any table left as None
    falls back to the built-in one.
    """
    importer = MobilityImporter(
        field_aliases=synonym_table,
        option_lists=option_lists,
        mobility_type_aliases=mobility_type_aliases,
    )
    return await importer.import_record(source, store)
