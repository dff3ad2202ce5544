# Copyright 2026 sterfmt Contributors
# SPDX-License-Identifier: Apache-2.0

"""Model and YAML loader for the ``.sterfmt.yaml`` configuration file."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sterfmt.syntax.lexer import DEFAULT_MAX_IDENTIFIER_LENGTH

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".sterfmt.yaml"


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or is invalid."""


class Config(BaseModel):
    """Settings shared by the CLI and the public API.

    Attributes:
        max_identifier_length: Longest bare word accepted as a directive.
        strict: Stop checking at the first problem.
        color: Colorize command-line output.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    max_identifier_length: int = Field(alias="max-identifier-length", default=DEFAULT_MAX_IDENTIFIER_LENGTH, gt=0)
    strict: bool = False
    color: bool = True


def load_config(path: Path) -> Config:
    """Load and validate a configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the ``.sterfmt.yaml`` file.

    Returns:
        A validated Config instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: config must be a YAML mapping")

    try:
        config = Config.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc

    logger.debug("loaded config from %s: %s", path, config)
    return config


def find_config(directory: Path) -> Path | None:
    """Return the path of the config file in ``directory``, or None if absent."""
    candidate = directory / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    return None
