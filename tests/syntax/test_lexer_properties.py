# Copyright 2026 sterfmt Contributors
# SPDX-License-Identifier: Apache-2.0

"""Property-based tests for the sterfmt lexer."""

import hypothesis.strategies as st
from hypothesis import given

from sterfmt.syntax.keywords import KEYWORDS, lookup
from sterfmt.syntax.lexer import Lexer, tokenize
from sterfmt.syntax.tokens import TokenType

# ###############
# Strategies
# ###############

_words = st.sampled_from([k.spelling for k in KEYWORDS])
_separators = st.sampled_from([",", ":", "/", " ", "\t", "\n"])


@st.composite
def balanced_markup(draw: st.DrawFn, depth: int = 0) -> str:
    """Markup where every ``<`` and ``{`` is closed after it was opened."""
    parts = draw(st.lists(st.one_of(_words, _separators), max_size=5))
    body = " ".join(parts)
    if depth >= 3 or not draw(st.booleans()):
        return body
    opener, closer = draw(st.sampled_from([("<", ">"), ("{", "}")]))
    inner = draw(balanced_markup(depth=depth + 1))
    tail = draw(balanced_markup(depth=depth + 1))
    return f"{body}{opener}{inner}{closer}{tail}"


_unknown_words = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=31).filter(
    lambda w: lookup(w) is None
)

# ###############
# Properties
# ###############


@given(st.text())
def test_stream_ends_with_exactly_one_eof(source: str) -> None:
    tokens = tokenize(source)
    assert tokens[-1].type == TokenType.EOF
    assert sum(1 for t in tokens if t.type == TokenType.EOF) == 1


@given(st.text())
def test_eof_is_stable(source: str) -> None:
    lexer = Lexer(source)
    last = list(lexer)[-1]
    assert lexer.next_token() == last
    assert lexer.next_token() == last


@given(st.text())
def test_balance_never_negative_and_scan_terminates(source: str) -> None:
    lexer = Lexer(source)
    count = 0
    for _ in lexer:
        assert lexer.nesting_balance >= 0
        count += 1
    assert count <= len(source) + 1


@given(balanced_markup())
def test_balanced_markup_returns_to_zero(source: str) -> None:
    lexer = Lexer(source)
    for _ in lexer:
        pass
    assert lexer.nesting_balance == 0
    assert lexer.diagnostics == []


@given(_unknown_words)
def test_unknown_word_is_one_illegal_token(word: str) -> None:
    tokens = tokenize(word)
    assert len(tokens) == 2
    assert tokens[0].type == TokenType.ILLEGAL
    assert tokens[0].text == word


@given(st.text(alphabet="xyz", min_size=32, max_size=80))
def test_overlong_word_keeps_cursor_consistent(word: str) -> None:
    lexer = Lexer(word)
    token = lexer.next_token()
    assert token.type == TokenType.ILLEGAL
    assert token.diagnostic is not None
    assert lexer.position == len(word)
    assert lexer.next_token().type == TokenType.EOF
