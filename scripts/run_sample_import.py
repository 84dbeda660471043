#!/usr/bin/env python3
"""Sample import harness for manual validation.

Imports the first data row of a CSV export into a fresh mobility form and
prints the result, so header aliases and option lists can be checked
against real exports without the form UI.

Usage:
    # Built-in vocabularies
    python scripts/run_sample_import.py tests/fixtures/start_mobility.csv

    # Custom vocabularies
    python scripts/run_sample_import.py export.csv --config config.yaml

    # JSON logs at debug level
    LOG_FORMAT=json LOG_LEVEL=DEBUG python scripts/run_sample_import.py export.csv
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from mobility_import.config import ConfigurationError, load_config, load_environment_config
from mobility_import.domain import MobilityForm
from mobility_import.importer import MobilityImporter
from mobility_import.logging.config import configure_logging


def print_header(title: str):
    """Print a formatted section header."""
    width = 60
    print("\n" + "=" * width)
    print(f" {title}")
    print("=" * width + "\n")


def print_result(result, form: MobilityForm):
    """Print the import result and the resulting form values."""
    print_header("Import Result")
    print(f"Success:         {'Yes' if result.success else 'No'}")
    print(f"Fields imported: {result.fields_imported}")

    if result.warnings:
        print("\nWarnings:")
        for warning in result.warnings:
            print(f"  - {warning}")

    print_header("Form Data")
    label_width = max(len(key) for key in form.data)
    for key, value in form.as_dict().items():
        print(f"  {key:<{label_width}}  {value or '-'}")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Import one mobility record from a CSV export and print the result"
    )
    parser.add_argument("csv_file", type=Path, help="CSV export to import")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML vocabulary file (default: MOBILITY_IMPORT_CONFIG or built-in tables)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )
    args = parser.parse_args()

    load_dotenv()

    try:
        env_config = load_environment_config()
        config = load_config(args.config or env_config.config_path)
    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return 1

    # CLI > environment > config file
    configure_logging(
        level=args.log_level or env_config.log_level or config.logging.level,
        format_type=env_config.log_format or config.logging.format,
        environment=env_config.environment,
    )

    importer = MobilityImporter.from_config(config)
    form = MobilityForm()

    try:
        with open(args.csv_file, "rb") as source:
            result = asyncio.run(importer.import_record(source, form))
    except OSError as e:
        print(f"Cannot open {args.csv_file}: {e}", file=sys.stderr)
        return 1

    print_result(result, form)
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
