"""
HTTP server configuration.
"""

from dataclasses import dataclass


@dataclass
class ServerConfig:
    """Where uvicorn binds."""

    host: str = "0.0.0.0"
    port: int = 3000
