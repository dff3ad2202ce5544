# Copyright 2026 sterfmt Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the feed, emit and register entry points."""

import io
from collections.abc import Iterator

import pytest

from sterfmt.api import FAILED, OK, emit, feed, register, registered_handlers, unregister
from sterfmt.syntax.lexer import Lexer
from sterfmt.syntax.tokens import DiagnosticKind


def problems_of_delimiters(text: str) -> list[DiagnosticKind]:
    """Return the delimiter diagnostic kinds the lexer reports for text."""
    lexer = Lexer(text)
    for _ in lexer:
        pass
    return [d.kind for d in lexer.diagnostics]


@pytest.fixture(autouse=True)
def _clean_registry() -> Iterator[None]:
    """Remove handlers registered by a test."""
    before = set(registered_handlers())
    yield
    for name in set(registered_handlers()) - before:
        unregister(name)


# -------- feed --------


def test_feed_accepts_balanced_markup() -> None:
    assert feed("<bold, red>hello</>") == OK


def test_feed_interpolates_arguments() -> None:
    assert feed("<%s>%d</>", "red", 3) == OK


def test_feed_rejects_unmatched_closer() -> None:
    assert feed("bold>") == FAILED


def test_feed_rejects_unclosed_opener() -> None:
    assert feed("<bold") == FAILED


@pytest.mark.parametrize("text", ["<bold", "{<red>", "bold>", "<red></>", "{center}"])
def test_feed_agrees_with_lexer_diagnostics(text: str) -> None:
    expected = FAILED if problems_of_delimiters(text) else OK
    assert feed(text) == expected


def test_feed_rejects_bad_interpolation() -> None:
    assert feed("<%d>", "red") == FAILED


def test_feed_without_args_does_not_interpolate() -> None:
    assert feed("<red>100%</>") == OK


# -------- emit --------


def test_emit_writes_text() -> None:
    out = io.StringIO()
    assert emit("<%s>hi</>", "green", stream=out) == OK
    assert out.getvalue() == "<green>hi</>"


def test_emit_defaults_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    assert emit("<blue></>") == OK
    assert capsys.readouterr().out == "<blue></>"


def test_emit_writes_nothing_on_failure() -> None:
    out = io.StringIO()
    assert emit("}", stream=out) == FAILED
    assert out.getvalue() == ""


# -------- register --------


def test_register_handler() -> None:
    def handler() -> None:
        pass

    assert register("shout", handler) == OK
    assert registered_handlers()["shout"] is handler


def test_register_duplicate_fails() -> None:
    assert register("shout", print) == OK
    assert register("shout", print) == FAILED


@pytest.mark.parametrize("name", ["", "two words", "x1", "ümlaut"])
def test_register_rejects_non_words(name: str) -> None:
    assert register(name, print) == FAILED


def test_register_rejects_builtin_directive() -> None:
    assert register("bold", print) == FAILED


def test_register_rejects_non_callable() -> None:
    assert register("shout", "not callable") == FAILED  # type: ignore[arg-type]


def test_registered_handlers_is_read_only() -> None:
    with pytest.raises(TypeError):
        registered_handlers()["shout"] = print  # type: ignore[index]


def test_unregister() -> None:
    register("shout", print)
    assert unregister("shout") == OK
    assert "shout" not in registered_handlers()
    assert unregister("shout") == FAILED


def test_top_level_exports() -> None:
    import sterfmt

    assert sterfmt.feed is feed
    assert sterfmt.emit is emit
    assert sterfmt.register is register
