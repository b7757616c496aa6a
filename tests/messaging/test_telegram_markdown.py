"""Tests for messaging/rendering/telegram_markdown.py."""

import pytest

from messaging.rendering import Dialect, transcode
from messaging.rendering.telegram_markdown import (
    escape_md_v2,
    mdv2_bold,
    mdv2_code_inline,
    mdv2_italic,
    mdv2_link,
)


class TestEscapeMdV2:
    """Tests for escape_md_v2."""

    def test_empty_string(self):
        assert escape_md_v2("") == ""

    def test_special_chars_escaped(self):
        assert escape_md_v2("1. a-b!") == "1\\. a\\-b\\!"

    def test_already_escaped_not_doubled(self):
        assert escape_md_v2(r"a\.b") == r"a\.b"


class TestMdV2Builders:
    """Tests for mdv2_bold, mdv2_italic, mdv2_code_inline and mdv2_link."""

    def test_bold_escapes_inner(self):
        assert mdv2_bold("a.b") == "*a\\.b*"

    def test_italic_escapes_inner(self):
        assert mdv2_italic("a-b") == "_a\\-b_"

    def test_code_inline_content_untouched(self):
        assert mdv2_code_inline("a.b*c") == "`a.b*c`"

    def test_link_escapes_label_and_url(self):
        assert mdv2_link("v1.0", "http://x.test") == "[v1\\.0](http://x\\.test)"

    def test_link_with_bracket_and_paren(self):
        assert mdv2_link("a]b", "http://x/(y)") == r"[a\]b](http://x/\(y\))"


class TestBuildersMatchTranscode:
    """Builders and transcode render the same markdown identically."""

    @pytest.mark.parametrize(
        "built,markdown",
        [
            (mdv2_bold("v1.2"), "**v1.2**"),
            (mdv2_italic("a-b"), "*a-b*"),
            (mdv2_code_inline("x=1"), "`x=1`"),
            (mdv2_link("x", "http://a.b"), "[x](http://a.b)"),
        ],
        ids=["bold", "italic", "code", "link"],
    )
    def test_same_output(self, built, markdown):
        assert built == transcode(markdown, Dialect.TELEGRAM)
