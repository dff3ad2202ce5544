# Copyright 2026 sterfmt Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for sterfmt."""
