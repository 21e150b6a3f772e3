# API endpoints package

from src.api.errors import ErrorResponse, create_error_response, register_error_handlers
from src.api.routes import router

__all__ = [
    "ErrorResponse",
    "create_error_response",
    "register_error_handlers",
    "router",
]
