# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Process execution collaborators used by adapters."""

from __future__ import annotations

from .process import (
    COMMAND_NOT_FOUND_STATUS,
    TIMEOUT_EXIT_STATUS,
    AvailabilityChecker,
    CommandOptions,
    ProcessRunner,
    SubprocessExecutionError,
    SubprocessRunner,
    command_exists,
    run_command,
)

__all__ = [
    "COMMAND_NOT_FOUND_STATUS",
    "TIMEOUT_EXIT_STATUS",
    "AvailabilityChecker",
    "CommandOptions",
    "ProcessRunner",
    "SubprocessExecutionError",
    "SubprocessRunner",
    "command_exists",
    "run_command",
]
