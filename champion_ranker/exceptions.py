"""
Exception classes for the champion ranker.

Centralized location for all custom exceptions to avoid circular imports.
"""


class ValidationError(Exception):
    """Raised when a competitor is built from invalid field values."""
    pass


class ConfigurationError(Exception):
    """Raised for unknown rosters or invalid ranker/CLI configuration."""
    pass
