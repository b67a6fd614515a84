# tests/test_slack_formatter.py
"""Tests for Slack mrkdwn helpers."""

from src.utils.slack_formatter import code_block, escape_mrkdwn


class TestEscapeMrkdwn:
    """Tests for escape_mrkdwn function."""

    def test_escape_ampersand(self):
        assert escape_mrkdwn("A & B") == "A &amp; B"

    def test_escape_angle_brackets(self):
        assert escape_mrkdwn("<script>") == "&lt;script&gt;"

    def test_no_escape_needed(self):
        assert escape_mrkdwn("Hello World") == "Hello World"


class TestCodeBlock:
    def test_wraps_in_fence(self):
        assert code_block("make test") == "```\nmake test\n```"

    def test_escapes_content(self):
        assert code_block("a < b") == "```\na &lt; b\n```"

    def test_inner_fence_cannot_close_block(self):
        result = code_block("before ``` after")
        assert result.count("```") == 2
        assert "`\u200b``" in result
