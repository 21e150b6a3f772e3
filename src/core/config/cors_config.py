"""
CORS configuration.
"""

from dataclasses import dataclass, field

DEFAULT_CORS_ORIGINS = ["*"]
DEFAULT_CORS_METHODS = ["GET", "POST", "PUT", "DELETE"]
DEFAULT_CORS_HEADERS = ["Content-Type", "Authorization"]


@dataclass
class CORSConfig:
    """CORS configuration."""

    origins: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    methods: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_METHODS))
    headers: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_HEADERS))
