# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers for turning raw tool output into findings."""

from __future__ import annotations

from .base import iter_stream_matches, relative_to_root
from .swiftformat import SWIFTFORMAT_PATTERN, parse_swiftformat

__all__ = ["SWIFTFORMAT_PATTERN", "iter_stream_matches", "parse_swiftformat", "relative_to_root"]
