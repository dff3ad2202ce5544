# Copyright 2026 sterfmt Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tokens, keyword table, and lexer for sterfmt markup."""

from sterfmt.syntax.keywords import KEYWORDS, Keyword, is_keyword, keywords_for, lookup
from sterfmt.syntax.lexer import (
    DEFAULT_MAX_IDENTIFIER_LENGTH,
    EOF_CHAR,
    Lexer,
    LexerError,
    problems,
    tokenize,
)
from sterfmt.syntax.tokens import (
    EOF_LITERAL,
    ILLEGAL_LITERAL,
    Diagnostic,
    DiagnosticKind,
    Token,
    TokenFamily,
    TokenType,
)

__all__ = [
    "DEFAULT_MAX_IDENTIFIER_LENGTH",
    "Diagnostic",
    "DiagnosticKind",
    "EOF_CHAR",
    "EOF_LITERAL",
    "ILLEGAL_LITERAL",
    "KEYWORDS",
    "Keyword",
    "Lexer",
    "LexerError",
    "Token",
    "TokenFamily",
    "TokenType",
    "is_keyword",
    "keywords_for",
    "lookup",
    "problems",
    "tokenize",
]
