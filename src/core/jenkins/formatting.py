# src/core/jenkins/formatting.py
"""Human-readable rendering of Jenkins build data for Slack.

All functions are pure and never raise on unexpected Jenkins values.
"""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from src.core.jenkins.models import BuildDetails, JobDetails
from src.utils.slack_formatter import escape_mrkdwn

RESULT_LABELS: dict[str, str] = {
    "SUCCESS": "✅ Success",
    "FAILURE": "❌ Failure",
    "ABORTED": "🛑 Aborted",
    "UNSTABLE": "⚠️ Unstable",
}
UNKNOWN_RESULT_LABEL = "❓ Unknown"

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %Z"

TRUNCATION_NOTICE = "... (earlier output truncated)\n"


def format_build_result(result: str | None) -> str:
    """Map a Jenkins build result to a label with a status glyph."""
    if not isinstance(result, str):
        return UNKNOWN_RESULT_LABEL
    return RESULT_LABELS.get(result, UNKNOWN_RESULT_LABEL)


def format_build_duration(duration_ms: int) -> str:
    """Render a millisecond duration as whole seconds.

    Truncates toward zero, e.g. 1500 -> "1 seconds".
    """
    return f"{int(duration_ms / 1000)} seconds"


def format_build_timestamp(
    timestamp_ms: int,
    tz: str = "UTC",
    fmt: str = DEFAULT_TIMESTAMP_FORMAT,
) -> str:
    """Render an epoch millisecond timestamp in an explicit timezone.

    Args:
        timestamp_ms: Epoch time in milliseconds.
        tz: IANA timezone name, e.g. "Europe/Berlin".
        fmt: strftime format string.

    Returns:
        Formatted date-time string.
    """
    dt = datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)
    return dt.astimezone(ZoneInfo(tz)).strftime(fmt)


def format_job_info(
    job_name: str,
    username: str,
    job: JobDetails,
    build: BuildDetails,
    tz: str = "UTC",
    fmt: str = DEFAULT_TIMESTAMP_FORMAT,
) -> str:
    """Compose the /jenkins-info reply.

    Args:
        job_name: Job name as typed by the user.
        username: Full name of the Jenkins account used by the bot.
        job: Job snapshot.
        build: Snapshot of the job's last build.
        tz: Timezone for the build timestamp.
        fmt: strftime format for the build timestamp.

    Returns:
        Slack mrkdwn message text.
    """
    lines = [
        f"*Jenkins Info for {escape_mrkdwn(job_name)}*",
        f"- Jenkins Username: {escape_mrkdwn(username)}",
        f"- Job Name: {escape_mrkdwn(job.display_name)}",
        f"- Job Description: {escape_mrkdwn(job.description or 'No description')}",
        f"- Job URL: {job.url}",
        f"- Last Build Number: {build.number}",
        f"- Last Build Result: {format_build_result(build.result)}",
        f"- Last Build Duration: {format_build_duration(build.duration)}",
        f"- Last Build Timestamp: {format_build_timestamp(build.timestamp, tz, fmt)}",
    ]
    return "\n".join(lines)


def paginate_console_log(text: str, page_size: int, max_pages: int) -> list[str]:
    """Split a console log into pages that fit in a Slack message.

    Pages break at line boundaries where possible. When the log needs more
    than max_pages pages, only the tail is kept and the first page starts
    with a truncation notice.

    Args:
        text: Full console log.
        page_size: Maximum characters per page.
        max_pages: Maximum number of pages to return.

    Returns:
        List of page texts, at least one entry.
    """
    text = text.rstrip()
    if not text:
        return ["(empty console log)"]

    budget = page_size * max_pages
    truncated = len(text) > budget
    if truncated:
        tail = text[-budget:]
        newline = tail.find("\n")
        if 0 <= newline < len(tail) - 1:
            tail = tail[newline + 1 :]
        text = tail

    pages: list[str] = []
    remaining = text
    while remaining:
        if len(remaining) <= page_size:
            pages.append(remaining)
            break
        split_at = remaining.rfind("\n", 0, page_size)
        if split_at <= 0:
            split_at = page_size
        pages.append(remaining[:split_at])
        # Drop only the newline the page break replaces
        if remaining[split_at] == "\n":
            split_at += 1
        remaining = remaining[split_at:]

    if len(pages) > max_pages:
        pages = pages[-max_pages:]
        truncated = True
    if truncated:
        pages[0] = TRUNCATION_NOTICE + pages[0]
    return pages
