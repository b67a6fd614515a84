"""Utility functions for the Jenkins Slack bot."""

from src.utils.logging import (
    configure_logging,
    get_request_id,
    set_request_id,
)
from src.utils.observability import setup_logfire
from src.utils.slack_formatter import code_block, escape_mrkdwn

__all__ = [
    "setup_logfire",
    "set_request_id",
    "get_request_id",
    "configure_logging",
    "escape_mrkdwn",
    "code_block",
]
