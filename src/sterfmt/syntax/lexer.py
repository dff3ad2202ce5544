# Copyright 2026 sterfmt Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for sterfmt markup.

Converts format strings such as ``<bold, red>text</>`` into a sequence of
tokens, tracking the nesting balance of ``<…>`` and ``{…}`` pairs.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from sterfmt.syntax.keywords import lookup
from sterfmt.syntax.tokens import (
    EOF_LITERAL,
    ILLEGAL_LITERAL,
    Diagnostic,
    DiagnosticKind,
    Token,
    TokenType,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

EOF_CHAR = ""
DEFAULT_MAX_IDENTIFIER_LENGTH = 31


class LexerError(Exception):
    """Raised by strict tokenizing on the first illegal token or diagnostic.

    Attributes:
        position: 0-based offset of the offending character.
    """

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"Position {position}: {message}")
        self.position = position


class Lexer:
    """Scanner state over a single input string.

    Each call to :meth:`next_token` consumes one token. Once the input is
    exhausted every further call returns an EOF token.
    """

    def __init__(self, source: str, max_identifier_length: int = DEFAULT_MAX_IDENTIFIER_LENGTH) -> None:
        if max_identifier_length < 1:
            raise LexerError(f"identifier bound must be positive, got {max_identifier_length}", 0)
        self._source = source
        self._max_identifier_length = max_identifier_length
        self._position = 0
        self._next_position = 1
        self._current = source[0] if source else EOF_CHAR
        self._balance = 0
        self._diagnostics: list[Diagnostic] = []
        self._eof: Token | None = None

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        """Offset of the current character."""
        return self._position

    @property
    def next_position(self) -> int:
        """Offset of the character after the current one."""
        return self._next_position

    @property
    def current_char(self) -> str:
        """The current character, or ``EOF_CHAR`` past the end of input."""
        return self._current

    @property
    def nesting_balance(self) -> int:
        """Number of ``<`` and ``{`` not yet closed."""
        return self._balance

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """All diagnostics recorded so far, in scan order."""
        return list(self._diagnostics)

    def advance(self) -> None:
        """Move the cursor one character forward.

        At end of input the cursor stays on ``EOF_CHAR``.
        """
        if self._current == EOF_CHAR and self._position >= len(self._source):
            return
        if self._next_position >= len(self._source):
            self._current = EOF_CHAR
        else:
            self._current = self._source[self._next_position]
        self._position = self._next_position
        self._next_position += 1

    def next_token(self) -> Token:
        """Scan and return the next token."""
        self._skip_whitespace()

        ch = self._current
        pos = self._position

        if ch in _OPENERS:
            self._balance += 1
            return self._single(_DELIMITERS[ch], ch, pos)
        if ch in _CLOSERS:
            diagnostic = None
            if self._balance == 0:
                diagnostic = self._report(DiagnosticKind.UNMATCHED_CLOSER, f"unmatched closing {ch!r}", pos)
            else:
                self._balance -= 1
            return self._single(_DELIMITERS[ch], ch, pos, diagnostic)
        if ch in _PUNCTUATION:
            return self._single(_PUNCTUATION[ch], ch, pos)
        if ch == EOF_CHAR:
            return self._end_of_input(pos)
        if _is_alpha(ch):
            return self._scan_word(pos)

        self.advance()
        return Token(TokenType.ILLEGAL, ILLEGAL_LITERAL, pos)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF token."""
        while True:
            token = self.next_token()
            yield token
            if token.is_eof:
                return

    # ------------------------------------------------------------------
    # Scanning helpers
    # ------------------------------------------------------------------

    def _skip_whitespace(self) -> None:
        while self._current in _WHITESPACE:
            self.advance()

    def _end_of_input(self, pos: int) -> Token:
        """Build the EOF token once; later calls return the same token."""
        if self._eof is None:
            diagnostic = None
            if self._balance > 0:
                diagnostic = self._report(
                    DiagnosticKind.UNCLOSED_DELIMITER, f"{self._balance} delimiter(s) left open", pos
                )
            self._eof = Token(TokenType.EOF, EOF_LITERAL, pos, diagnostic)
        return self._eof

    def _single(self, token_type: TokenType, ch: str, pos: int, diagnostic: Diagnostic | None = None) -> Token:
        self.advance()
        return Token(token_type, ch, pos, diagnostic)

    def _scan_word(self, start: int) -> Token:
        """Scan a maximal alphabetic run and resolve it against the keyword table."""
        while _is_alpha(self._current):
            self.advance()
        word = self._source[start : self._position]

        if len(word) > self._max_identifier_length:
            diagnostic = self._report(
                DiagnosticKind.IDENTIFIER_TOO_LONG,
                f"identifier of {len(word)} characters exceeds the limit of {self._max_identifier_length}",
                start,
            )
            return Token(TokenType.ILLEGAL, word, start, diagnostic)

        keyword = lookup(word)
        if keyword is None:
            return Token(TokenType.ILLEGAL, word, start)
        return Token(keyword.type, keyword.spelling, start)

    def _report(self, kind: DiagnosticKind, message: str, position: int) -> Diagnostic:
        diagnostic = Diagnostic(kind, message, position)
        self._diagnostics.append(diagnostic)
        logger.debug("diagnostic at %d: %s", position, message)
        return diagnostic


def tokenize(
    source: str,
    *,
    strict: bool = False,
    max_identifier_length: int = DEFAULT_MAX_IDENTIFIER_LENGTH,
) -> list[Token]:
    """Tokenize sterfmt markup into a list of tokens.

    The final token is always a single EOF token. Illegal tokens and
    diagnostics do not stop scanning unless ``strict`` is set.

    Args:
        source: The full format string.
        strict: Raise on the first illegal token or diagnostic.
        max_identifier_length: Longest bare word accepted as a directive.

    Returns:
        A list of Token objects ending with one EOF token.

    Raises:
        LexerError: In strict mode, on the first illegal token or diagnostic.
    """
    tokens: list[Token] = []
    for token in Lexer(source, max_identifier_length=max_identifier_length):
        if strict:
            _raise_on_problem(token)
        tokens.append(token)
    return tokens


def problems(tokens: list[Token]) -> list[tuple[int, str]]:
    """Return ``(position, message)`` for every illegal token and diagnostic, in order."""
    found: list[tuple[int, str]] = []
    for token in tokens:
        if token.diagnostic is not None:
            found.append((token.diagnostic.position, token.diagnostic.message))
        elif token.is_illegal:
            found.append((token.position, _illegal_message(token)))
    return found


# ################
# Implementation
# ################

# C isspace in the default locale
_WHITESPACE = frozenset(" \t\n\v\f\r")
_OPENERS = frozenset("<{")
_CLOSERS = frozenset(">}")

_DELIMITERS: dict[str, TokenType] = {
    "<": TokenType.OPEN,
    ">": TokenType.CLOSE,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

_PUNCTUATION: dict[str, TokenType] = {
    ":": TokenType.COLON,
    ",": TokenType.DELIM,
    "/": TokenType.RESET,
}


def _is_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _illegal_message(token: Token) -> str:
    if token.text == ILLEGAL_LITERAL:
        return "unexpected character"
    return f"unknown directive {token.text!r}"


def _raise_on_problem(token: Token) -> None:
    if token.diagnostic is not None:
        raise LexerError(token.diagnostic.message, token.diagnostic.position)
    if token.is_illegal:
        raise LexerError(_illegal_message(token), token.position)
