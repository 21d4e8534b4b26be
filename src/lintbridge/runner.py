# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Drive an adapter through its setup, invocation and parsing stages."""

from __future__ import annotations

import logging

from .adapters.base import LinterAdapter
from .config import LintOptions
from .core.models import LintResult

LOGGER = logging.getLogger(__name__)


def run_adapter(adapter: LinterAdapter, options: LintOptions) -> LintResult:
    """Verify, run and parse one adapter invocation.

    Args:
        adapter: Adapter bound to its process collaborators.
        options: Invocation options for the lint root.

    Returns:
        LintResult: Parsed result of the run.

    Raises:
        SetupError: If the linter is not installed. Nothing is executed.
        ConfigurationError: If ``options`` cannot be honoured. Nothing is executed.
    """

    adapter.verify_setup(options.dir, options.prefix)
    output = adapter.lint(options)
    result = adapter.parse_output(options.dir, output)
    LOGGER.debug(
        "%s finished with status %d: %d error(s), %d warning(s)",
        adapter.name,
        output.status,
        len(result.error),
        len(result.warning),
    )
    return result


__all__ = ["run_adapter"]
