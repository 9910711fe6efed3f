"""
Custom exceptions for Chronicle.
"""


class ChronicleError(Exception):
    """Base exception for Chronicle."""
    pass


class CatalogInputError(ChronicleError, TypeError):
    """Exception raised when the catalog is handed something that is not a collection of records."""
    pass


class ConfigurationError(ChronicleError):
    """Exception raised when configuration is invalid."""
    pass


class SnapshotError(ChronicleError):
    """Exception raised when a catalog snapshot cannot be read."""
    pass


class NavigationError(ChronicleError, ValueError):
    """Exception raised when the archive browser is asked for an impossible move."""
    pass
