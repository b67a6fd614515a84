# src/interfaces/slack/handlers.py
"""Slash command and view handlers for the Jenkins bot.

Provides handlers for:
- /jenkins-info <job>  (job and last build summary)
- /jenkins-log <job>   (opens a modal asking for a build number)
- jenkins_log view submission (posts the console log of that build)

Slash commands use the lazy listener pattern: ack within 3s, then call
Jenkins in the background. Every failure is logged and reported to the
invoking user as an ephemeral message.
"""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from slack_sdk.errors import SlackApiError

from src.config import Settings
from src.core.jenkins import (
    JenkinsClient,
    format_job_info,
    paginate_console_log,
)
from src.interfaces.slack.blocks import (
    InputBlock,
    Markdown,
    PlainText,
    PlainTextInput,
    SectionBlock,
)
from src.interfaces.slack.gateway import SlackGateway
from src.utils.logging import set_request_id
from src.utils.slack_formatter import code_block, escape_mrkdwn

logger = logging.getLogger(__name__)

INFO_COMMAND = "/jenkins-info"
LOG_COMMAND = "/jenkins-log"
LOG_CALLBACK_ID = "jenkins_log"
BUILD_NUMBER_BLOCK_ID = "build_number"
BUILD_NUMBER_ACTION_ID = "build_number"
ERROR_PREFIX = "Sorry, something went wrong:"


@dataclass
class BotDependencies:
    """Configuration and clients shared by all handlers.

    Attributes:
        settings: Application settings (read-only after start-up).
        jenkins: Jenkins API client.
    """

    settings: Settings
    jenkins: JenkinsClient

    @classmethod
    def from_settings(cls, settings: Settings) -> "BotDependencies":
        return cls(settings=settings, jenkins=JenkinsClient.from_settings(settings))


def build_log_modal_blocks() -> list[SectionBlock | InputBlock]:
    """Blocks of the build number prompt opened by /jenkins-log."""
    return [
        SectionBlock(
            text=Markdown(
                text="Please enter the build number for the job you want to see "
                "the console log."
            )
        ),
        InputBlock(
            block_id=BUILD_NUMBER_BLOCK_ID,
            label=PlainText(text="Build Number"),
            element=PlainTextInput(
                action_id=BUILD_NUMBER_ACTION_ID,
                placeholder=PlainText(text="Enter a number"),
            ),
        ),
    ]


def parse_build_number(raw: str | None) -> int | None:
    """Parse user input into a build number.

    Returns:
        Positive build number, or None if the input is not one.
    """
    value = (raw or "").strip().lstrip("#")
    # isdigit() also accepts superscripts and circled digits
    if not (value.isascii() and value.isdigit()):
        return None
    number = int(value)
    return number if number > 0 else None


def _submitted_build_number(view: dict[str, Any]) -> str | None:
    values = view.get("state", {}).get("values", {})
    return values.get(BUILD_NUMBER_BLOCK_ID, {}).get(BUILD_NUMBER_ACTION_ID, {}).get(
        "value"
    )


def _usage(command_name: str) -> str:
    return f"Usage: `{command_name} <job-name>`"


async def ack_command(ack: Callable) -> None:
    """Acknowledge a slash command immediately.

    Args:
        ack: Slack ack function to acknowledge receipt.
    """
    await ack()


class JenkinsCommandHandlers:
    """Handlers bound to one set of BotDependencies."""

    def __init__(self, deps: BotDependencies) -> None:
        self.deps = deps

    async def _notify_user(
        self,
        gateway: SlackGateway,
        channel_id: str,
        user_id: str,
        text: str,
    ) -> None:
        """Best-effort ephemeral reply; Slack failures are only logged."""
        try:
            await gateway.send_message(channel_id, text, user_id, ephemeral=True)
        except SlackApiError as e:
            logger.warning("Failed to send message to Slack: %s", e)

    async def _report_error(
        self,
        gateway: SlackGateway,
        channel_id: str,
        user_id: str,
        error: Exception,
    ) -> None:
        await self._notify_user(gateway, channel_id, user_id, f"{ERROR_PREFIX} {error}")

    async def process_jenkins_info(self, command: dict[str, Any], client: Any) -> None:
        """Reply with the job's details and its last build."""
        set_request_id(command.get("trigger_id", ""))
        gateway = SlackGateway(client)
        channel_id = command["channel_id"]
        user_id = command["user_id"]
        job_name = command.get("text", "").strip()

        if not job_name:
            await self._notify_user(gateway, channel_id, user_id, _usage(INFO_COMMAND))
            return

        logger.info("%s %s requested by %s", INFO_COMMAND, job_name, user_id)
        try:
            jenkins = self.deps.jenkins
            user = await jenkins.fetch_current_user()
            job, build = await jenkins.fetch_last_build(job_name)
            text = format_job_info(
                job_name,
                user.full_name,
                job,
                build,
                tz=self.deps.settings.display_timezone,
                fmt=self.deps.settings.timestamp_format,
            )
            await gateway.send_message(channel_id, text, user_id, ephemeral=False)
        except Exception as e:
            logger.exception("Error processing %s %s: %s", INFO_COMMAND, job_name, e)
            await self._report_error(gateway, channel_id, user_id, e)

    async def process_jenkins_log(self, command: dict[str, Any], client: Any) -> None:
        """Open the modal that asks for a build number."""
        set_request_id(command.get("trigger_id", ""))
        gateway = SlackGateway(client)
        channel_id = command["channel_id"]
        user_id = command["user_id"]
        job_name = command.get("text", "").strip()

        if not job_name:
            await self._notify_user(gateway, channel_id, user_id, _usage(LOG_COMMAND))
            return

        logger.info("%s %s requested by %s", LOG_COMMAND, job_name, user_id)
        try:
            await gateway.open_modal(
                command["trigger_id"],
                f"Jenkins Log for {job_name}",
                build_log_modal_blocks(),
                LOG_CALLBACK_ID,
                private_metadata=json.dumps(
                    {"job_name": job_name, "channel_id": channel_id}
                ),
            )
        except Exception as e:
            logger.exception("Error processing %s %s: %s", LOG_COMMAND, job_name, e)
            await self._report_error(gateway, channel_id, user_id, e)

    async def handle_log_submission(
        self,
        ack: Callable,
        body: dict[str, Any],
        view: dict[str, Any],
        client: Any,
    ) -> None:
        """Post the console log for the submitted build number.

        Invalid input keeps the modal open with an inline error. Valid
        input closes the modal; the log is then sent page by page as
        ephemeral messages in the channel the command was invoked from.
        """
        build_number = parse_build_number(_submitted_build_number(view))
        if build_number is None:
            await ack(
                response_action="errors",
                errors={BUILD_NUMBER_BLOCK_ID: "Please enter a positive whole number."},
            )
            return
        await ack()

        set_request_id(view.get("id", ""))
        user_id = body.get("user", {}).get("id", "")
        metadata = json.loads(view.get("private_metadata") or "{}")
        job_name = metadata.get("job_name", "")
        channel_id = metadata.get("channel_id", "")
        if not job_name or not channel_id:
            logger.error("Log submission from %s without job or channel", user_id)
            return

        gateway = SlackGateway(client)
        logger.info("Console log %s #%s requested by %s", job_name, build_number, user_id)
        try:
            log_text = await self.deps.jenkins.fetch_console_log(job_name, build_number)
            pages = paginate_console_log(
                log_text,
                page_size=self.deps.settings.log_page_size,
                max_pages=self.deps.settings.log_max_pages,
            )
            header = f"*Console Log for {escape_mrkdwn(job_name)} #{build_number}*"
            for i, page in enumerate(pages, start=1):
                part = f" ({i}/{len(pages)})" if len(pages) > 1 else ""
                await gateway.send_message(
                    channel_id,
                    f"{header}{part}\n{code_block(page)}",
                    user_id,
                    ephemeral=True,
                )
        except Exception as e:
            logger.exception(
                "Error fetching console log %s #%s: %s", job_name, build_number, e
            )
            await self._report_error(gateway, channel_id, user_id, e)

    def register(self, app: Any) -> None:
        """Register all listeners on a slack-bolt AsyncApp.

        Args:
            app: AsyncApp instance.
        """

        async def process_info(command: dict[str, Any], client: Any) -> None:
            await self.process_jenkins_info(command, client)

        async def process_log(command: dict[str, Any], client: Any) -> None:
            await self.process_jenkins_log(command, client)

        async def log_submission(
            ack: Callable, body: dict[str, Any], view: dict[str, Any], client: Any
        ) -> None:
            await self.handle_log_submission(ack, body, view, client)

        app.command(INFO_COMMAND)(ack=ack_command, lazy=[process_info])
        app.command(LOG_COMMAND)(ack=ack_command, lazy=[process_log])
        app.view(LOG_CALLBACK_ID)(log_submission)
