# Copyright 2026 sterfmt Contributors
# SPDX-License-Identifier: Apache-2.0

"""Directive keyword table.

Bare words inside a tag are resolved against this table. Lookup is exact and
case-sensitive, and the first matching entry in table order wins.
"""

from __future__ import annotations

from dataclasses import dataclass

from sterfmt.syntax.tokens import TokenFamily, TokenType

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Keyword:
    """A directive spelling and the token category it resolves to."""

    spelling: str
    type: TokenType


KEYWORDS: tuple[Keyword, ...] = (
    # direction
    Keyword("up", TokenType.DIRECT_UP),
    Keyword("down", TokenType.DIRECT_DOWN),
    Keyword("left", TokenType.DIRECT_LEFT),
    Keyword("right", TokenType.DIRECT_RIGHT),
    # decoration
    Keyword("none", TokenType.DECOR_NONE),
    Keyword("bold", TokenType.DECOR_BOLD),
    Keyword("underline", TokenType.DECOR_UNDERLINE),
    Keyword("italic", TokenType.DECOR_ITALIC),
    Keyword("blink", TokenType.DECOR_BLINK),
    Keyword("invert", TokenType.DECOR_INVERT),
    Keyword("strike", TokenType.DECOR_STRIKE),
    # color
    Keyword("default", TokenType.COLOR_DEFAULT),
    Keyword("black", TokenType.COLOR_BLACK),
    Keyword("red", TokenType.COLOR_RED),
    Keyword("green", TokenType.COLOR_GREEN),
    Keyword("yellow", TokenType.COLOR_YELLOW),
    Keyword("blue", TokenType.COLOR_BLUE),
    Keyword("magenta", TokenType.COLOR_MAGENTA),
    Keyword("cyan", TokenType.COLOR_CYAN),
    Keyword("white", TokenType.COLOR_WHITE),
    # alignment; "default" is shadowed by the color entry above
    Keyword("default", TokenType.ALIGN_DEFAULT),
    Keyword("justify", TokenType.ALIGN_JUSTIFY),
    Keyword("center", TokenType.ALIGN_CENTER),
)


def lookup(spelling: str) -> Keyword | None:
    """Return the first keyword whose spelling equals ``spelling``, or None."""
    for keyword in KEYWORDS:
        if keyword.spelling == spelling:
            return keyword
    return None


def keywords_for(family: TokenFamily) -> list[Keyword]:
    """Return the table entries of one family, in table order."""
    return [keyword for keyword in KEYWORDS if keyword.type.family is family]


def is_keyword(spelling: str) -> bool:
    """Return True if ``spelling`` resolves to a table entry."""
    return lookup(spelling) is not None
