# Copyright 2026 sterfmt Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the directive keyword table."""

import pytest

from sterfmt.syntax.keywords import KEYWORDS, Keyword, is_keyword, keywords_for, lookup
from sterfmt.syntax.tokens import TokenFamily, TokenType


def test_lookup_returns_matching_entry() -> None:
    assert lookup("bold") == Keyword("bold", TokenType.DECOR_BOLD)


def test_lookup_unknown_returns_none() -> None:
    assert lookup("purple") is None


def test_lookup_empty_string_returns_none() -> None:
    assert lookup("") is None


def test_lookup_is_case_sensitive() -> None:
    assert lookup("Bold") is None


def test_default_resolves_to_color_entry() -> None:
    keyword = lookup("default")
    assert keyword is not None
    assert keyword.type == TokenType.COLOR_DEFAULT


def test_alignment_default_is_in_table() -> None:
    spellings = [k.spelling for k in keywords_for(TokenFamily.ALIGNMENT)]
    assert spellings == ["default", "justify", "center"]


@pytest.mark.parametrize(
    ("family", "expected"),
    [
        (TokenFamily.DIRECTION, ["up", "down", "left", "right"]),
        (TokenFamily.DECORATION, ["none", "bold", "underline", "italic", "blink", "invert", "strike"]),
        (
            TokenFamily.COLOR,
            ["default", "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"],
        ),
    ],
)
def test_families_in_table_order(family: TokenFamily, expected: list[str]) -> None:
    assert [k.spelling for k in keywords_for(family)] == expected


def test_table_has_no_service_entries() -> None:
    assert keywords_for(TokenFamily.SERVICE) == []


def test_every_directive_category_has_an_entry() -> None:
    directive_types = {t for t in TokenType if t.is_directive}
    assert {k.type for k in KEYWORDS} == directive_types


def test_is_keyword() -> None:
    assert is_keyword("cyan")
    assert not is_keyword("cyanide")


def test_keywords_are_immutable() -> None:
    with pytest.raises(AttributeError):
        KEYWORDS[0].spelling = "sideways"  # type: ignore[misc]
