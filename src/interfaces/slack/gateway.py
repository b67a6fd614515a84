# src/interfaces/slack/gateway.py
"""Outbound Slack calls used by the command handlers.

Wraps a Slack AsyncWebClient so handlers only deal with channels, users
and typed blocks.
"""

import logging
from collections.abc import Sequence
from typing import Any

from src.interfaces.slack.blocks import (
    MODAL_TITLE_LIMIT,
    InputBlock,
    ModalView,
    PlainText,
    SectionBlock,
)

logger = logging.getLogger(__name__)


def _fit_title(title: str) -> str:
    if len(title) <= MODAL_TITLE_LIMIT:
        return title
    return title[: MODAL_TITLE_LIMIT - 1] + "…"


class SlackGateway:
    """Posts messages and opens modals through the Slack Web API."""

    def __init__(self, client: Any) -> None:
        """Initialize with a Slack client.

        Args:
            client: Slack AsyncWebClient instance.
        """
        self._client = client

    async def send_message(
        self,
        channel_id: str,
        text: str,
        user_id: str,
        ephemeral: bool,
    ) -> None:
        """Send a message to a channel.

        Args:
            channel_id: Slack channel ID.
            text: Message text (mrkdwn).
            user_id: Recipient of an ephemeral message.
            ephemeral: If True, only user_id sees the message.
        """
        if ephemeral:
            await self._client.chat_postEphemeral(
                channel=channel_id, user=user_id, text=text
            )
        else:
            await self._client.chat_postMessage(channel=channel_id, text=text)
        logger.debug(
            "Sent %s message to %s", "ephemeral" if ephemeral else "channel", channel_id
        )

    async def open_modal(
        self,
        trigger_id: str,
        title: str,
        blocks: Sequence[SectionBlock | InputBlock],
        callback_id: str,
        private_metadata: str = "",
    ) -> ModalView:
        """Open a modal with Submit and Cancel actions.

        Args:
            trigger_id: Trigger ID from the invoking interaction.
            title: Modal title, shortened to Slack's limit if needed.
            blocks: Typed blocks to render.
            callback_id: Identifier the view_submission is routed by.
            private_metadata: Opaque string returned with the submission.

        Returns:
            The ModalView that was sent.
        """
        view = ModalView(
            title=PlainText(text=_fit_title(title)),
            blocks=list(blocks),
            submit=PlainText(text="Submit"),
            close=PlainText(text="Cancel"),
            callback_id=callback_id,
            private_metadata=private_metadata,
        )
        await self._client.views_open(trigger_id=trigger_id, view=view.to_slack())
        logger.debug("Opened modal %s", callback_id)
        return view
