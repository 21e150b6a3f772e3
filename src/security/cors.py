"""
CORS policy stage.

Starlette's CORSMiddleware only answers requests that carry an Origin header,
and only treats OPTIONS as a preflight when Access-Control-Request-Method is
present. This policy answers every OPTIONS itself and stamps the simple CORS
headers on requests without an Origin, so a wildcard policy is visible on
every response.
"""

from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI
from starlette.datastructures import Headers, MutableHeaders
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from src.core.config.cors_config import CORSConfig


class CORSPolicyMiddleware(CORSMiddleware):
    """CORSMiddleware that also decorates same-origin, non-browser and bare OPTIONS responses."""

    def __init__(
        self,
        app: ASGIApp,
        allow_methods: Sequence[str] = ("GET",),
        allow_headers: Sequence[str] = (),
        **kwargs: Any,
    ) -> None:
        super().__init__(app, allow_methods=allow_methods, allow_headers=allow_headers, **kwargs)
        # Advertise the configured lists verbatim; self.allow_headers still drives request checks.
        if "*" not in allow_methods:
            self.preflight_headers["Access-Control-Allow-Methods"] = ",".join(allow_methods)
        if allow_headers and "*" not in allow_headers:
            self.preflight_headers["Access-Control-Allow-Headers"] = ",".join(allow_headers)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await super().__call__(scope, receive, send)
            return

        headers = Headers(scope=scope)
        if scope["method"] == "OPTIONS" and "access-control-request-method" not in headers:
            response = self.options_response(request_headers=headers)
            await response(scope, receive, send)
            return

        if "origin" in headers:
            await super().__call__(scope, receive, send)
            return

        async def send_with_cors_headers(message: Message) -> None:
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                response_headers = MutableHeaders(scope=message)
                response_headers.update(self.simple_headers)
            await send(message)

        await self.app(scope, receive, send_with_cors_headers)

    def options_response(self, request_headers: Headers) -> Response:
        """Answer an OPTIONS request that is not a full preflight with the policy headers and 204."""
        headers = dict(self.preflight_headers)
        origin = request_headers.get("origin")
        if origin is not None and self.preflight_explicit_allow_origin and self.is_allowed_origin(origin=origin):
            headers["Access-Control-Allow-Origin"] = origin
        return Response(status_code=204, headers=headers)


def add_cors(app: FastAPI, cors_config: CORSConfig) -> None:
    """Install the CORS policy on an application."""
    app.add_middleware(
        CORSPolicyMiddleware,
        allow_origins=cors_config.origins,
        allow_credentials=False,
        allow_methods=cors_config.methods,
        allow_headers=cors_config.headers,
    )
