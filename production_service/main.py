"""
Application entry point.

Configuration, middleware and lifecycle management are delegated to
specialized modules.
"""

import logging

import sentry_sdk

from production_service.config.settings import get_settings
from production_service.core.app_factory import create_app
from production_service.core.shared.logger import configure_logging

settings = get_settings()

configure_logging(level=settings.LOG_LEVEL, json_format=settings.LOG_JSON)

logger = logging.getLogger(__name__)

# Initialize Sentry for error tracking
if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        send_default_pii=False,
        environment=settings.ENVIRONMENT,
        release=settings.VERSION,
    )
    logger.info("Sentry error tracking enabled")

# Create application using factory
app = create_app(settings)


def run() -> None:
    import uvicorn

    logger.info(f"Starting application in {settings.ENVIRONMENT} mode on port {settings.APP_PORT}")
    uvicorn.run(
        "production_service.main:app",
        host="0.0.0.0",
        port=settings.APP_PORT,
        reload=settings.DEBUG,
        log_config=None,
    )


if __name__ == "__main__":
    run()
