# Copyright 2026 sterfmt Contributors
# SPDX-License-Identifier: Apache-2.0

"""Public entry points: feed, emit and register.

Rendering formatted text belongs to the layers above the lexer, so ``feed``
and ``emit`` only check that the delimiters of the interpolated text are
balanced. Body text and unknown words are left to those layers.
Every function returns a status code, ``OK`` or ``FAILED``.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, TextIO

from sterfmt.syntax.keywords import is_keyword
from sterfmt.syntax.lexer import Lexer
from sterfmt.syntax.tokens import DiagnosticKind

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

OK = 0
FAILED = 1

Handler = Callable[..., Any]


def feed(format_string: str, *args: object) -> int:
    """Accept markup for formatting.

    ``args`` are interpolated with ``%``-formatting when given. Returns
    ``OK`` when every delimiter of the resulting text is matched.
    """
    text = _interpolate(format_string, args)
    if text is None or not _is_sound(text):
        return FAILED
    return OK


def emit(format_string: str, *args: object, stream: TextIO | None = None) -> int:
    """Write markup to ``stream`` (default ``sys.stdout``) after checking it.

    Nothing is written when the check fails.
    """
    text = _interpolate(format_string, args)
    if text is None or not _is_sound(text):
        return FAILED
    out = stream if stream is not None else sys.stdout
    out.write(text)
    return OK


def register(name: str, callback: Handler) -> int:
    """Register a handler for a custom directive.

    The name must be a bare alphabetic word that is neither a built-in
    directive nor already registered.
    """
    if not name or not (name.isascii() and name.isalpha()):
        logger.debug("rejected handler name %r: not a bare word", name)
        return FAILED
    if is_keyword(name) or name in _handlers:
        logger.debug("rejected handler name %r: already defined", name)
        return FAILED
    if not callable(callback):
        logger.debug("rejected handler for %r: not callable", name)
        return FAILED
    _handlers[name] = callback
    logger.debug("registered handler for %r", name)
    return OK


def unregister(name: str) -> int:
    """Remove a registered handler."""
    if _handlers.pop(name, None) is None:
        return FAILED
    return OK


def registered_handlers() -> Mapping[str, Handler]:
    """Return a read-only view of the registered handlers."""
    return MappingProxyType(_handlers)


# ################
# Implementation
# ################

_handlers: dict[str, Handler] = {}

_DELIMITER_KINDS = frozenset({DiagnosticKind.UNMATCHED_CLOSER, DiagnosticKind.UNCLOSED_DELIMITER})


def _interpolate(format_string: str, args: tuple[object, ...]) -> str | None:
    if not args:
        return format_string
    try:
        return format_string % args
    except (TypeError, ValueError) as exc:
        logger.debug("cannot interpolate %r: %s", format_string, exc)
        return None


def _is_sound(text: str) -> bool:
    lexer = Lexer(text)
    for _ in lexer:
        pass
    unmatched = [d for d in lexer.diagnostics if d.kind in _DELIMITER_KINDS]
    for diagnostic in unmatched:
        logger.debug("position %d: %s", diagnostic.position, diagnostic.message)
    return not unmatched
