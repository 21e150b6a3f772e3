"""
Application-wide constants.
"""

# Response headers applied to every response, in the order they are written.
SECURITY_HEADERS: dict[str, str] = {
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains; preload",
    "Content-Security-Policy": "default-src 'self'; script-src 'self' 'unsafe-inline'; object-src 'none';",
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "no-referrer",
    "Permissions-Policy": "geolocation=(self), microphone=()",
}

GREETING = "Hello, World! Your site is secured with security headers and CORS enabled."
DATA_RECEIVED_MESSAGE = "Data received successfully!"
