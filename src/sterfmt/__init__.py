# Copyright 2026 sterfmt Contributors
# SPDX-License-Identifier: Apache-2.0

"""sterfmt - a markup language for terminal text formatting."""

from sterfmt.api import emit, feed, register
from sterfmt.syntax import Lexer, LexerError, Token, TokenType, tokenize

__version__ = "0.1.0"

__all__ = [
    "Lexer",
    "LexerError",
    "Token",
    "TokenType",
    "emit",
    "feed",
    "register",
    "tokenize",
]
