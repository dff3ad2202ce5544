# Copyright 2026 sterfmt Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the sterfmt command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from yachalk import chalk

from sterfmt.config.loader import Config, ConfigError, find_config, load_config
from sterfmt.syntax.lexer import Lexer, LexerError, problems, tokenize
from sterfmt.syntax.tokens import Token, TokenFamily

# ###############
# Public Interface
# ###############

DEMO_INPUT = "<bold, red></>"


def main() -> None:
    """Run the sterfmt CLI."""
    parser = argparse.ArgumentParser(
        prog="sterfmt",
        description="sterfmt - terminal formatting markup tools",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # tokens subcommand
    tokens_parser = subparsers.add_parser(
        "tokens",
        help="Print the token stream of some markup",
        description="Tokenize markup and print one token per line.",
    )
    _add_input_arguments(tokens_parser)
    tokens_parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Report illegal tokens and unmatched or unclosed delimiters",
        description="Tokenize markup and report every lexical problem.",
    )
    _add_input_arguments(check_parser)
    check_parser.add_argument(
        "--strict",
        action="store_true",
        help="Stop at the first problem",
    )

    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_FAMILY_STYLES = {
    TokenFamily.SERVICE: chalk.blue,
    TokenFamily.DIRECTION: chalk.magenta,
    TokenFamily.DECORATION: chalk.bold,
    TokenFamily.ALIGNMENT: chalk.cyan,
    TokenFamily.COLOR: chalk.green,
}


def _add_input_arguments(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "text",
        nargs="?",
        default=None,
        help=f"Markup to process (default: {DEMO_INPUT!r})",
    )
    subparser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Read the markup from a file instead",
    )
    subparser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Configuration file (default: .sterfmt.yaml in the current directory)",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    try:
        config = _load_config(args.config)
        source = _read_source(args)
    except (ConfigError, OSError, UnicodeDecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.command == "tokens":
        return _cmd_tokens(source, config, color=config.color and not args.no_color)
    if args.command == "check":
        return _cmd_check(source, config, strict=config.strict or args.strict)
    return 0


def _load_config(path: Path | None) -> Config:
    if path is None:
        path = find_config(Path.cwd())
        if path is None:
            return Config()
    return load_config(path)


def _read_source(args: argparse.Namespace) -> str:
    if args.file is not None:
        return args.file.read_text(encoding="utf-8")
    if args.text is not None:
        return args.text
    return DEMO_INPUT


def _cmd_tokens(source: str, config: Config, color: bool) -> int:
    """Handle the tokens subcommand."""
    print(source)
    print()
    for token in Lexer(source, max_identifier_length=config.max_identifier_length):
        print(_format_token(token, color))
        if token.diagnostic is not None:
            print(f"Warning: position {token.diagnostic.position}: {token.diagnostic.message}")
    return 0


def _cmd_check(source: str, config: Config, strict: bool) -> int:
    """Handle the check subcommand."""
    try:
        tokens = tokenize(source, strict=strict, max_identifier_length=config.max_identifier_length)
    except LexerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    found = problems(tokens)
    for position, message in found:
        print(f"Error: Position {position}: {message}", file=sys.stderr)
    if found:
        return 1

    print("No issues found.")
    return 0


def _format_token(token: Token, color: bool) -> str:
    name = token.type.name
    if not color:
        return f"{name:<16}{token.text}"
    if token.is_illegal:
        style = chalk.red
    else:
        style = _FAMILY_STYLES[token.type.family]
    return f"{style(f'{name:<16}')}{token.text}"
