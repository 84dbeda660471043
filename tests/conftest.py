"""Shared fixtures for the mobility import tests."""

import pytest

from mobility_import.config import ImportConfig
from mobility_import.config.defaults import HRBP_OPTIONS, POSITION_OPTIONS
from mobility_import.domain import MobilityForm
from mobility_import.importer import MobilityImporter
from mobility_import.logging.context import clear_log_context


@pytest.fixture(autouse=True)
def clean_log_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def form():
    """Fresh mobility form with default values."""
    return MobilityForm()


@pytest.fixture
def import_config():
    """Import configuration with the built-in vocabularies."""
    return ImportConfig()


@pytest.fixture
def importer(import_config):
    """Importer using the built-in vocabularies."""
    return MobilityImporter.from_config(import_config)


@pytest.fixture
def position_options():
    """Built-in position titles, in display order."""
    return list(POSITION_OPTIONS)


@pytest.fixture
def hrbp_options():
    """Built-in HRBP names, in display order."""
    return list(HRBP_OPTIONS)
