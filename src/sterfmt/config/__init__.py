# Copyright 2026 sterfmt Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration file support for sterfmt."""

from sterfmt.config.loader import CONFIG_FILE_NAME, Config, ConfigError, find_config, load_config

__all__ = [
    "CONFIG_FILE_NAME",
    "Config",
    "ConfigError",
    "find_config",
    "load_config",
]
