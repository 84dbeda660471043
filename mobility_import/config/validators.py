"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List

from mobility_import.utils.text import normalize_key


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check a raw configuration for ambiguities that validation allows.

    Neither case is fixed automatically: alias tables and option lists are
    used exactly as configured.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    for table_name in ("field_aliases", "mobility_type_aliases"):
        table = config_dict.get(table_name)
        if not isinstance(table, dict):
            continue

        # Aliases equal after folding but pointing to different targets:
        # the first one in table order always wins.
        targets: Dict[str, Any] = {}
        first_alias: Dict[str, str] = {}
        for alias, target in table.items():
            if not isinstance(alias, str):
                continue
            key = normalize_key(alias)
            if key in targets and targets[key] != target:
                warning_messages.append(
                    f"{table_name}: '{alias}' and '{first_alias[key]}' are the same alias "
                    f"after normalization but map to '{target}' and '{targets[key]}'; "
                    f"'{first_alias[key]}' wins"
                )
            else:
                targets.setdefault(key, target)
                first_alias.setdefault(key, alias)

    for list_name in ("position_options", "hrbp_options"):
        options = config_dict.get(list_name)
        if not isinstance(options, list):
            continue

        normalized = [normalize_key(o) for o in options if isinstance(o, str)]
        duplicates = sorted({o for o in normalized if normalized.count(o) > 1})
        if duplicates:
            warning_messages.append(
                f"Duplicate options in {list_name} can never be matched after the first: "
                f"{', '.join(duplicates)}"
            )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
