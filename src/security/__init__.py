# Response-hardening middleware

from src.security.cors import CORSPolicyMiddleware, add_cors
from src.security.headers import SecurityHeadersMiddleware

__all__ = [
    "CORSPolicyMiddleware",
    "SecurityHeadersMiddleware",
    "add_cors",
]
