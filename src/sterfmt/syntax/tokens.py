# Copyright 2026 sterfmt Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token categories and token values produced by the sterfmt lexer."""

from __future__ import annotations

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############

EOF_LITERAL = "EOF"
ILLEGAL_LITERAL = "ILLEGAL"


class TokenFamily(enum.Enum):
    """Groups of token categories."""

    SERVICE = "service"
    DIRECTION = "direction"
    DECORATION = "decoration"
    ALIGNMENT = "alignment"
    COLOR = "color"


class TokenType(enum.Enum):
    """All token categories produced by the sterfmt lexer.

    The value of each member is a ``(family, name)`` pair so that members
    sharing a name across families (``default``) stay distinct.
    """

    # Service
    ILLEGAL = (TokenFamily.SERVICE, "illegal")
    EOF = (TokenFamily.SERVICE, "eof")
    OPEN = (TokenFamily.SERVICE, "<")
    CLOSE = (TokenFamily.SERVICE, ">")
    LBRACE = (TokenFamily.SERVICE, "{")
    RBRACE = (TokenFamily.SERVICE, "}")
    COLON = (TokenFamily.SERVICE, ":")
    DELIM = (TokenFamily.SERVICE, ",")
    RESET = (TokenFamily.SERVICE, "/")

    # Direction
    DIRECT_UP = (TokenFamily.DIRECTION, "up")
    DIRECT_DOWN = (TokenFamily.DIRECTION, "down")
    DIRECT_LEFT = (TokenFamily.DIRECTION, "left")
    DIRECT_RIGHT = (TokenFamily.DIRECTION, "right")

    # Decoration
    DECOR_NONE = (TokenFamily.DECORATION, "none")
    DECOR_BOLD = (TokenFamily.DECORATION, "bold")
    DECOR_UNDERLINE = (TokenFamily.DECORATION, "underline")
    DECOR_ITALIC = (TokenFamily.DECORATION, "italic")
    DECOR_BLINK = (TokenFamily.DECORATION, "blink")
    DECOR_INVERT = (TokenFamily.DECORATION, "invert")
    DECOR_STRIKE = (TokenFamily.DECORATION, "strike")

    # Alignment
    ALIGN_DEFAULT = (TokenFamily.ALIGNMENT, "default")
    ALIGN_JUSTIFY = (TokenFamily.ALIGNMENT, "justify")
    ALIGN_CENTER = (TokenFamily.ALIGNMENT, "center")

    # Color
    COLOR_DEFAULT = (TokenFamily.COLOR, "default")
    COLOR_BLACK = (TokenFamily.COLOR, "black")
    COLOR_RED = (TokenFamily.COLOR, "red")
    COLOR_GREEN = (TokenFamily.COLOR, "green")
    COLOR_YELLOW = (TokenFamily.COLOR, "yellow")
    COLOR_BLUE = (TokenFamily.COLOR, "blue")
    COLOR_MAGENTA = (TokenFamily.COLOR, "magenta")
    COLOR_CYAN = (TokenFamily.COLOR, "cyan")
    COLOR_WHITE = (TokenFamily.COLOR, "white")

    @property
    def family(self) -> TokenFamily:
        """Return the family this category belongs to."""
        return self.value[0]

    @property
    def is_directive(self) -> bool:
        """Return True for formatting directives (every non-service category)."""
        return self.family is not TokenFamily.SERVICE


class DiagnosticKind(enum.Enum):
    """Kinds of lexer diagnostics."""

    UNMATCHED_CLOSER = "unmatched-closer"
    IDENTIFIER_TOO_LONG = "identifier-too-long"
    UNCLOSED_DELIMITER = "unclosed-delimiter"


@dataclass(frozen=True)
class Diagnostic:
    """A recoverable problem found while scanning.

    Attributes:
        kind: What went wrong.
        message: Human-readable description.
        position: 0-based offset of the offending character.
    """

    kind: DiagnosticKind
    message: str
    position: int


@dataclass(frozen=True)
class Token:
    """A lexical token.

    Attributes:
        type: The token category.
        text: Canonical spelling for keywords, the source text for
            punctuation and unknown words, or ``"EOF"`` / ``"ILLEGAL"``.
        position: 0-based offset of the first character of the token.
        diagnostic: Problem reported while this token was scanned, if any.
    """

    type: TokenType
    text: str
    position: int
    diagnostic: Diagnostic | None = None

    @property
    def is_illegal(self) -> bool:
        return self.type is TokenType.ILLEGAL

    @property
    def is_eof(self) -> bool:
        return self.type is TokenType.EOF
