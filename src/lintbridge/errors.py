# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised by lint adapters."""

from __future__ import annotations


class LintBridgeError(RuntimeError):
    """Base class for errors surfaced to the orchestrator."""


class SetupError(LintBridgeError):
    """Raised when the external linter is not installed."""


class ConfigurationError(LintBridgeError):
    """Raised when the caller supplies options an adapter cannot honour."""


__all__ = ["ConfigurationError", "LintBridgeError", "SetupError"]
