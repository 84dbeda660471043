"""Integration tests: real CSV exports through config, importer and form."""

import asyncio
from pathlib import Path

import pytest

from mobility_import.config import load_config
from mobility_import.domain import MobilityForm
from mobility_import.importer import NO_DATA_WARNING, MobilityImporter

FIXTURES = Path(__file__).parent.parent / "fixtures"


def import_fixture(importer, filename, form):
    """Import a fixture file opened in binary mode, as an upload would be."""
    with open(FIXTURES / filename, "rb") as source:
        return asyncio.run(importer.import_record(source, form))


@pytest.fixture
def default_importer():
    return MobilityImporter.from_config(load_config())


class TestBuiltInVocabularies:
    """Imports using the built-in alias and option tables."""

    def test_semicolon_export_fills_every_field(self, default_importer):
        form = MobilityForm()

        result = import_fixture(default_importer, "start_mobility.csv", form)

        assert result.success is True
        assert result.fields_imported == 8
        assert result.warnings == []
        assert form.as_dict() == {
            "mobility_type": "start",
            "start_date": "2025-08-28",
            "end_date": "",
            "location": "Barcelona",
            "full_name": "Juan García López",
            "gpid": "12345678",
            "temporary_position": "Sales Delivery Driver (Repartidor Preventa)",
            "original_position": "Delivery Driver (Conductor)",
            "hrbp": "Jesus Tejado",
        }

    def test_excel_export_with_bom_and_crlf(self, default_importer):
        """Excel-style export: BOM, CRLF, quoted commas and an unknown column."""
        form = MobilityForm()

        result = import_fixture(default_importer, "end_mobility_excel.csv", form)

        assert result.success is True
        assert result.fields_imported == 8
        assert result.warnings == []
        assert form["mobility_type"] == "end"
        assert form["end_date"] == "2025-09-15"
        assert form["start_date"] == ""
        assert form["location"] == "Madrid"
        assert form["full_name"] == "Rodríguez Pérez, María"
        assert form["gpid"] == "87654321"
        assert form["temporary_position"] == "Pre Sale Seller (Vendedor Preventa)"
        assert form["original_position"] == "Auto Sale Seller (Vendedor Autoventa)"
        assert form["hrbp"] == "Marta Mengual"

    def test_unmatched_values_become_warnings(self, default_importer):
        form = MobilityForm()

        result = import_fixture(default_importer, "unmatched_values.csv", form)

        assert result.success is True
        assert result.fields_imported == 5
        assert result.warnings == [
            'No matching position for: "Astronauta"',
            'No matching HRBP for: "Desconocido"',
        ]
        assert set(result.field_warnings) == {"temporary_position", "hrbp"}
        assert form["start_date"] == "2025-09-01"
        # Unrecognized date shapes are kept for the form layer to flag
        assert form["end_date"] == "sin fecha"
        assert form["original_position"] == "Sales Promoter ADR (ADR)"
        assert form["temporary_position"] == ""
        assert form["hrbp"] == ""

    def test_header_only_export(self, default_importer):
        form = MobilityForm()

        result = import_fixture(default_importer, "header_only.csv", form)

        assert result.to_dict() == {
            "success": False,
            "fields_imported": 0,
            "warnings": [NO_DATA_WARNING],
        }
        assert form.as_dict() == MobilityForm().as_dict()


class TestConfiguredVocabularies:
    """Imports using vocabularies loaded from YAML."""

    def test_custom_tables_replace_built_ins(self, tmp_path):
        config = load_config(FIXTURES / "valid_config.yaml")
        importer = MobilityImporter.from_config(config)
        csv_path = tmp_path / "export.csv"
        csv_path.write_text(
            "Sede,GPID,Cargo actual,Cargo destino,HRBP\n"
            "Sevilla,555,chofer,Conductor,Laura Gil\n",
            encoding="utf-8",
        )
        form = MobilityForm()

        with open(csv_path, "rb") as source:
            result = asyncio.run(importer.import_record(source, form))

        # HRBP is not in the configured alias table, so the column is ignored
        assert result.fields_imported == 3
        assert result.warnings == ['No matching position for: "Conductor"']
        assert form["location"] == "Sevilla"
        assert form["gpid"] == "555"
        assert form["original_position"] == "Chofer"
        assert form["hrbp"] == ""

    def test_partial_config_keeps_default_aliases(self):
        config = load_config(FIXTURES / "minimal_config.yaml")
        importer = MobilityImporter.from_config(config)
        form = MobilityForm()

        result = import_fixture(importer, "start_mobility.csv", form)

        # Positions still use the built-in list; HRBP uses the configured one
        assert result.fields_imported == 7
        assert result.warnings == ['No matching HRBP for: "Jesús Tejado"']
        assert form["temporary_position"] == "Sales Delivery Driver (Repartidor Preventa)"
        assert form["hrbp"] == ""
