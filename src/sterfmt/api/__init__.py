# Copyright 2026 sterfmt Contributors
# SPDX-License-Identifier: Apache-2.0

"""Public entry points for feeding, emitting and extending sterfmt markup."""

from sterfmt.api.entry_points import FAILED, OK, emit, feed, register, registered_handlers, unregister

__all__ = [
    "FAILED",
    "OK",
    "emit",
    "feed",
    "register",
    "registered_handlers",
    "unregister",
]
