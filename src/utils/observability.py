"""Observability configuration with Pydantic Logfire."""

import logging

from src.config import settings

logger = logging.getLogger(__name__)


def setup_logfire() -> None:
    """Configure Logfire for observability.

    Only activates if LOGFIRE_TOKEN environment variable is set.
    Call this at application startup before the first Jenkins request.
    """
    if not settings.logfire_token:
        return

    try:
        import logfire

        logfire.configure(token=settings.logfire_token, service_name="jenkins-slackbot")
        logfire.instrument_httpx()
    except Exception as e:
        # Log but don't fail - observability is optional
        logger.warning("Failed to configure Logfire: %s", str(e))
