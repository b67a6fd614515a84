# tests/test_gateway.py
"""Tests for the Slack messaging gateway."""

import pytest

from src.interfaces.slack.blocks import InputBlock, PlainText, PlainTextInput
from src.interfaces.slack.gateway import SlackGateway


class TestSendMessage:
    @pytest.mark.asyncio
    async def test_ephemeral_targets_user(self, slack_client):
        gateway = SlackGateway(slack_client)

        await gateway.send_message("C123", "only for you", "U456", ephemeral=True)

        slack_client.chat_postEphemeral.assert_awaited_once_with(
            channel="C123", user="U456", text="only for you"
        )
        slack_client.chat_postMessage.assert_not_called()

    @pytest.mark.asyncio
    async def test_channel_message(self, slack_client):
        gateway = SlackGateway(slack_client)

        await gateway.send_message("C123", "hello all", "U456", ephemeral=False)

        slack_client.chat_postMessage.assert_awaited_once_with(
            channel="C123", text="hello all"
        )
        slack_client.chat_postEphemeral.assert_not_called()


class TestOpenModal:
    def _blocks(self):
        return [
            InputBlock(
                block_id="build_number",
                label=PlainText(text="Build Number"),
                element=PlainTextInput(action_id="build_number"),
            )
        ]

    @pytest.mark.asyncio
    async def test_opens_modal_with_actions(self, slack_client):
        gateway = SlackGateway(slack_client)

        await gateway.open_modal(
            "trigger-1", "Jenkins Log", self._blocks(), "jenkins_log", "meta"
        )

        kwargs = slack_client.views_open.call_args.kwargs
        assert kwargs["trigger_id"] == "trigger-1"
        view = kwargs["view"]
        assert view["title"]["text"] == "Jenkins Log"
        assert view["submit"]["text"] == "Submit"
        assert view["close"]["text"] == "Cancel"
        assert view["callback_id"] == "jenkins_log"
        assert view["private_metadata"] == "meta"

    @pytest.mark.asyncio
    async def test_long_title_is_shortened(self, slack_client):
        gateway = SlackGateway(slack_client)

        view = await gateway.open_modal(
            "trigger-1", "Jenkins Log for a-very-long-job-name", self._blocks(), "cb"
        )

        assert len(view.title.text) == 24
        assert view.title.text.endswith("…")
