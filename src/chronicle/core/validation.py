"""
Configuration and input validation utilities.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, List, Tuple

from .config import (
    ERA_CONFIG,
    ARCHIVE_CONFIG,
    DISPLAY_CONFIG,
    LOGGING_CONFIG,
)
from .exceptions import CatalogInputError, ConfigurationError


def validate_configuration() -> Tuple[bool, List[str]]:
    """
    Validate application configuration.

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    # Import here to avoid circular imports
    from ..utils.date_utils import parse_instant

    errors = []

    cutoff = parse_instant(ERA_CONFIG["EARLY_ERA_CUTOFF"])
    first_start = parse_instant(ERA_CONFIG["FIRST_ERA_START"])
    if cutoff is None:
        errors.append(f"EARLY_ERA_CUTOFF is not a valid ISO date: {ERA_CONFIG['EARLY_ERA_CUTOFF']!r}")
    if first_start is None:
        errors.append(f"FIRST_ERA_START is not a valid ISO date: {ERA_CONFIG['FIRST_ERA_START']!r}")
    if cutoff is not None and first_start is not None and first_start <= cutoff:
        errors.append("FIRST_ERA_START must be later than EARLY_ERA_CUTOFF")

    if not ARCHIVE_CONFIG["SESSION_PLACEHOLDER"].strip():
        errors.append("SESSION_PLACEHOLDER must not be blank")

    if ARCHIVE_CONFIG["DEFAULT_SORT_FIELD"] not in ARCHIVE_CONFIG["SORT_FIELDS"]:
        errors.append(f"DEFAULT_SORT_FIELD must be one of: {', '.join(ARCHIVE_CONFIG['SORT_FIELDS'])}")

    if ARCHIVE_CONFIG["DEFAULT_SORT_ORDER"] not in ("asc", "desc"):
        errors.append("DEFAULT_SORT_ORDER must be 'asc' or 'desc'")

    if DISPLAY_CONFIG["DEFAULT_LAYOUT"] not in DISPLAY_CONFIG["LAYOUTS"]:
        errors.append(f"DEFAULT_LAYOUT must be one of: {', '.join(DISPLAY_CONFIG['LAYOUTS'])}")

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if LOGGING_CONFIG["LEVEL"].upper() not in valid_log_levels:
        errors.append(f"LOG_LEVEL must be one of: {', '.join(valid_log_levels)}")

    is_valid = len(errors) == 0
    return is_valid, errors


def validate_and_raise():
    """
    Validate configuration and raise ConfigurationError if invalid.
    """
    is_valid, errors = validate_configuration()
    if not is_valid:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        logging.getLogger(__name__).error(error_msg)
        raise ConfigurationError(error_msg)


def ensure_sequence(value: Any, name: str) -> List[Any]:
    """
    Check that a catalog input is a collection of records and return it as a list.

    Strings, bytes and mappings are collections too, but never valid here.

    Args:
        value: The input to check
        name: Argument name used in the error message

    Returns:
        The records as a list (input order preserved)

    Raises:
        CatalogInputError: If value is not an iterable of records
    """
    if value is None:
        return []
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
        raise CatalogInputError(
            f"{name} must be a sequence of records, got {type(value).__name__}"
        )
    return list(value)
