# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity buckets understood by the orchestrator."""

    ERROR = "error"
    WARNING = "warning"


_SEVERITY_TO_RESULT_FIELD: Final[dict[Severity, str]] = {
    Severity.ERROR: "error",
    Severity.WARNING: "warning",
}


def result_field(severity: Severity) -> str:
    """Return the :class:`LintResult` field name collecting ``severity`` findings."""

    return _SEVERITY_TO_RESULT_FIELD[severity]


__all__ = ["Severity", "result_field"]
