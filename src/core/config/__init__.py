"""
Configuration package - unified access point.

This package provides all configuration classes and the global config instance.
"""

from src.core.config.cors_config import CORSConfig
from src.core.config.logging_config import LoggingConfig
from src.core.config.server_config import ServerConfig
from src.core.config.settings import Config, config

__all__ = [
    "CORSConfig",
    "Config",
    "LoggingConfig",
    "ServerConfig",
    "config",
]
