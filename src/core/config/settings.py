"""
Main configuration class that composes all configs.
"""

import json
import os

from dotenv import load_dotenv

from src.core.config.cors_config import (
    DEFAULT_CORS_HEADERS,
    DEFAULT_CORS_METHODS,
    DEFAULT_CORS_ORIGINS,
    CORSConfig,
)
from src.core.config.logging_config import LoggingConfig
from src.core.config.server_config import ServerConfig
from src.core.errors import ConfigurationError

# Load environment variables from a .env file
load_dotenv()

HTTP_METHODS = {"GET", "HEAD", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"}
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _json_list(name: str, default: list[str]) -> list[str]:
    """Read a JSON array of strings from the environment, falling back to the default."""
    raw = os.getenv(name)
    if raw is None:
        return list(default)
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        return list(default)
    if not isinstance(value, list):
        return list(default)
    return [str(item) for item in value]


class Config:
    """Main configuration class."""

    def __init__(self) -> None:
        # Problems found while reading the environment, reported by validate()
        self._load_errors: list[str] = []

        # Empty values count as unset
        self.server = ServerConfig(
            host=os.getenv("HOST") or "0.0.0.0",
            port=self._int_env("PORT", 3000),
        )

        # CORS configuration
        self.cors = CORSConfig(
            origins=_json_list("CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
            methods=[m.upper() for m in _json_list("CORS_METHODS", DEFAULT_CORS_METHODS)],
            headers=_json_list("CORS_HEADERS", DEFAULT_CORS_HEADERS),
        )

        self.logging = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO").upper(),
            format=os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            file_path=os.getenv("LOG_FILE_PATH"),
        )

        # Development settings
        self.debug = os.getenv("DEBUG", "false").lower() == "true"
        self.environment = os.getenv("ENVIRONMENT", "development")

    def _int_env(self, name: str, default: int) -> int:
        """Read an integer from the environment, recording a load error and keeping the default if it does not parse."""
        raw = os.getenv(name) or str(default)
        try:
            return int(raw)
        except ValueError:
            self._load_errors.append(f"{name} must be an integer, got '{raw}'")
            return default

    def validate(self) -> bool:
        """Validate configuration."""
        errors = list(self._load_errors)

        if not 1 <= self.server.port <= 65535:
            errors.append(f"PORT must be between 1 and 65535, got {self.server.port}")

        if not self.cors.origins:
            errors.append("CORS_ORIGINS must list at least one origin")

        if not self.cors.methods:
            errors.append("CORS_METHODS must list at least one method")

        unknown_methods = sorted(set(self.cors.methods) - HTTP_METHODS)
        if unknown_methods:
            errors.append(f"CORS_METHODS contains unknown methods: {', '.join(unknown_methods)}")

        if self.logging.level not in LOG_LEVELS:
            errors.append(f"LOG_LEVEL '{self.logging.level}' is not a valid level")

        if errors:
            raise ConfigurationError(f"Configuration errors: {', '.join(errors)}")

        return True


# Global config instance
config = Config()
