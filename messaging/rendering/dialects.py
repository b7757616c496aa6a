"""Target dialects and their rendering rules."""

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict

# Characters with syntactic meaning in Telegram MarkdownV2
MDV2_RESERVED = frozenset("_*[]()~`>#+-=|{}.!")


class Dialect(StrEnum):
    """Markup dialect understood by a downstream chat platform."""

    SLACK = "slack"
    TELEGRAM = "telegram"


class DialectRules(BaseModel):
    """Fixed rendering rules for one dialect (not configurable via env)."""

    reserved: frozenset[str] = frozenset()
    escape_span_content: bool = False
    escape_link_url: bool = False
    bold_delimiter: str = "*"
    italic_delimiter: str = "_"
    link_style: Literal["angle", "inline"] = "angle"

    model_config = ConfigDict(extra="forbid", frozen=True)


DIALECT_RULES: dict[Dialect, DialectRules] = {
    Dialect.SLACK: DialectRules(),
    Dialect.TELEGRAM: DialectRules(
        reserved=MDV2_RESERVED,
        escape_span_content=True,
        escape_link_url=True,
        link_style="inline",
    ),
}


def rules_for(dialect: Dialect | str) -> DialectRules:
    """Look up the rules for a dialect, accepting its string value."""
    return DIALECT_RULES[Dialect(dialect)]
