# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lint adapters and their registry."""

from __future__ import annotations

from .base import LinterAdapter
from .registry import DEFAULT_REGISTRY, AdapterRegistry
from .swiftformat import SwiftFormatAdapter

__all__ = ["DEFAULT_REGISTRY", "AdapterRegistry", "LinterAdapter", "SwiftFormatAdapter"]
