"""
Core module for Chronicle.
Contains configuration, exceptions, logging setup, and validation.
"""

from .config import *
from .exceptions import *
from .logger import setup_logging, get_logger
from .validation import validate_configuration, validate_and_raise, ensure_sequence

__all__ = [
    'setup_logging',
    'get_logger',
    'validate_configuration',
    'validate_and_raise',
    'ensure_sequence',
    'ChronicleError',
    'CatalogInputError',
    'ConfigurationError',
    'SnapshotError',
    'NavigationError',
]
