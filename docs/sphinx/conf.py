# Copyright 2026 sterfmt Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for sterfmt documentation."""

project = "sterfmt"
author = "sterfmt Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
