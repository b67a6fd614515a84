# src/utils/slack_formatter.py
"""Helpers for building Slack mrkdwn text.

Slack treats &, < and > as control characters in mrkdwn, so any text
that comes from an external system must be escaped before it is
embedded in a message.
"""

# Slack renders "```" inside a code block as the end of the block
_FENCE = "```"
_FENCE_ESCAPED = "`\u200b``"


def escape_mrkdwn(text: str) -> str:
    """Escape special mrkdwn characters.

    Args:
        text: Text that may contain special characters.

    Returns:
        Text with special characters escaped.
    """
    # Escape &, <, > for Slack
    text = text.replace("&", "&amp;")
    text = text.replace("<", "&lt;")
    text = text.replace(">", "&gt;")
    return text


def code_block(text: str) -> str:
    """Wrap text in a preformatted block.

    Args:
        text: Raw text, e.g. console output.

    Returns:
        Escaped text fenced with triple backticks.
    """
    body = escape_mrkdwn(text).replace(_FENCE, _FENCE_ESCAPED)
    return f"{_FENCE}\n{body}\n{_FENCE}"
