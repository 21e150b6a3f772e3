import structlog
import uvicorn
from fastapi import FastAPI

from src.api.errors import register_error_handlers
from src.api.routes import router
from src.core.config import Config, config
from src.core.utils.logging import configure_logging
from src.security.cors import add_cors
from src.security.headers import SecurityHeadersMiddleware

logger = structlog.get_logger()


# --- Application Setup ---


def create_app(app_config: Config = config) -> FastAPI:
    """Build the application with its full response pipeline."""
    app = FastAPI(
        title="Secured Hello",
        description="Two-route service with CORS and static security headers.",
        version="0.1.0",
        debug=app_config.debug,
    )

    app.include_router(router)
    register_error_handlers(app)

    # Added last so it wraps CORS and also covers preflight responses.
    add_cors(app, app_config.cors)
    app.add_middleware(SecurityHeadersMiddleware)

    return app


app = create_app()


# --- Entrypoint ---


def run() -> None:
    """Validate configuration, set up logging and serve the app with uvicorn."""
    config.validate()
    configure_logging(config.logging)

    logger.info(
        f"Server running on port {config.server.port}",
        host=config.server.host,
        environment=config.environment,
        cors_origins=config.cors.origins,
        cors_methods=config.cors.methods,
        cors_headers=config.cors.headers,
    )

    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
        log_level=config.logging.level.lower(),
    )


if __name__ == "__main__":
    run()
