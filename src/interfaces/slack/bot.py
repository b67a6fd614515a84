# src/interfaces/slack/bot.py
"""Slack bot wiring with AsyncApp.

Registers the Jenkins slash commands and the console log modal, then
serves them through Socket Mode (when SLACK_APP_TOKEN is set) or the
built-in HTTP receiver verified by SLACK_SIGNING_SECRET.
"""

import asyncio
import logging
import sys

from dotenv import load_dotenv
from slack_bolt.async_app import AsyncApp

# Load environment variables from .env file
load_dotenv()
from slack_bolt.adapter.socket_mode.async_handler import AsyncSocketModeHandler

from src.config import Settings, settings
from src.interfaces.slack.handlers import BotDependencies, JenkinsCommandHandlers
from src.utils.logging import configure_logging
from src.utils.observability import setup_logfire

logger = logging.getLogger(__name__)

EVENTS_PATH = "/slack/events"


def create_app(
    app_settings: Settings | None = None,
    deps: BotDependencies | None = None,
) -> AsyncApp:
    """Create the AsyncApp and register all Jenkins handlers.

    Args:
        app_settings: Settings to use. Defaults to the module singleton.
        deps: Handler dependencies. Built from app_settings when omitted.

    Returns:
        Configured AsyncApp instance.
    """
    app_settings = app_settings or settings
    deps = deps or BotDependencies.from_settings(app_settings)

    app = AsyncApp(
        token=app_settings.slack_bot_token,
        signing_secret=app_settings.slack_signing_secret,
        # Socket Mode requests are authenticated by the app token
        request_verification_enabled=not app_settings.socket_mode,
    )
    JenkinsCommandHandlers(deps).register(app)
    return app


async def start_socket_mode(app: AsyncApp, app_token: str) -> None:
    """Serve the app over Socket Mode until cancelled."""
    handler = AsyncSocketModeHandler(app, app_token)
    logger.info("Starting Jenkins bot with Socket Mode...")
    try:
        await handler.start_async()
    except asyncio.CancelledError:
        logger.info("Received shutdown signal")
    finally:
        await handler.close_async()
        logger.info("Jenkins bot stopped")


def main() -> None:
    """Entry point: validate configuration and start serving."""
    configure_logging(settings.log_level, settings.log_format)
    setup_logfire()

    missing = settings.validate_required()
    if missing:
        logger.error("Missing required configuration: %s", ", ".join(missing))
        sys.exit(1)

    logger.info("Jenkins server: %s", settings.jenkins_url)
    app = create_app(settings)

    if settings.socket_mode:
        try:
            asyncio.run(start_socket_mode(app, settings.slack_app_token))
        except KeyboardInterrupt:
            logger.info("Shutdown complete")
    else:
        logger.info("Starting Jenkins bot on port %s%s", settings.port, EVENTS_PATH)
        app.start(port=settings.port, path=EVENTS_PATH)


if __name__ == "__main__":
    main()
