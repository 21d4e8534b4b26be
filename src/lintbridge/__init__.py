# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Adapters that run external linters and normalise their diagnostics."""

from __future__ import annotations

from .adapters import DEFAULT_REGISTRY, AdapterRegistry, LinterAdapter, SwiftFormatAdapter
from .config import LintOptions
from .core.models import CommandOutput, Finding, LintResult
from .errors import ConfigurationError, LintBridgeError, SetupError
from .runner import run_adapter

__all__ = [
    "DEFAULT_REGISTRY",
    "AdapterRegistry",
    "CommandOutput",
    "ConfigurationError",
    "Finding",
    "LintBridgeError",
    "LintOptions",
    "LintResult",
    "LinterAdapter",
    "SetupError",
    "SwiftFormatAdapter",
    "run_adapter",
]
