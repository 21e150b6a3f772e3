"""
Core error classes for the service.
"""


class ConfigurationError(ValueError):
    """Raised when environment-derived configuration is invalid."""

    pass
