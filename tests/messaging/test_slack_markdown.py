"""Tests for messaging/rendering/slack_markdown.py."""

import pytest

from messaging.rendering import Dialect, transcode
from messaging.rendering.slack_markdown import (
    slack_bold,
    slack_code_inline,
    slack_italic,
    slack_link,
)


class TestSlackBuilders:
    """Tests for slack_bold, slack_italic, slack_code_inline and slack_link."""

    def test_bold(self):
        assert slack_bold("hi.") == "*hi.*"

    def test_italic(self):
        assert slack_italic("hi") == "_hi_"

    def test_code_inline(self):
        assert slack_code_inline("a*b") == "`a*b`"

    def test_link(self):
        assert slack_link("Docs", "https://x.test") == "<https://x.test|Docs>"


class TestBuildersMatchTranscode:
    """Builders and transcode render the same markdown identically."""

    @pytest.mark.parametrize(
        "built,markdown",
        [
            (slack_bold("v1.2"), "**v1.2**"),
            (slack_italic("a-b"), "_a-b_"),
            (slack_code_inline("x=1"), "`x=1`"),
            (slack_link("x", "http://a.b"), "[x](http://a.b)"),
        ],
        ids=["bold", "italic", "code", "link"],
    )
    def test_same_output(self, built, markdown):
        assert built == transcode(markdown, Dialect.SLACK)
