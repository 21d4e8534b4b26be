# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Adapter for https://github.com/nicklockwood/SwiftFormat."""

from __future__ import annotations

import logging
import shlex
from pathlib import Path
from typing import ClassVar, Final

from ..config import LintOptions
from ..core.models import CommandOutput, LintResult, LintResultBuilder
from ..core.severity import Severity
from ..parsers.swiftformat import parse_swiftformat
from .base import LinterAdapter

LOGGER = logging.getLogger(__name__)

LINT_FLAG: Final[str] = "--lint"
# SwiftFormat scans the directory itself; it is always pointed at the working directory.
TARGET: Final[str] = "."


class SwiftFormatAdapter(LinterAdapter):
    """Run SwiftFormat in lint or fix mode and collect its diagnostics.

    ``files`` and ``linter_prefix`` from :class:`LintOptions` are ignored.
    SwiftFormat only reports "warning" diagnostics, all of which are filed
    under :attr:`Severity.ERROR`.
    """

    name: ClassVar[str] = "SwiftFormat"
    executable: ClassVar[str] = "swiftformat"
    supported_extensions: ClassVar[tuple[str, ...]] = ("swift",)
    diagnostic_severity: ClassVar[Severity] = Severity.ERROR

    def build_command(self, options: LintOptions) -> list[str]:
        """Return ``<prefix> swiftformat [--lint] [<args>] .`` as an argument list."""

        command = [*shlex.split(options.prefix), self.executable]
        if not options.fix:
            command.append(LINT_FLAG)
        command.extend(shlex.split(options.args))
        command.append(TARGET)
        return command

    def lint(self, options: LintOptions) -> CommandOutput:
        """Run SwiftFormat inside ``options.dir``.

        Args:
            options: Invocation options; ``extensions`` must be exactly ``("swift",)``.

        Returns:
            CommandOutput: Exit status and captured streams. A non-zero status is
            returned as-is for :meth:`parse_output` to interpret.

        Raises:
            ConfigurationError: If a different extension set is requested.
        """

        self.check_extensions(options)
        command = self.build_command(options)
        LOGGER.debug("running %s in %s", shlex.join(command), options.dir)
        return self._runner.run(command, cwd=options.dir, ignore_errors=True)

    def parse_output(self, directory: Path, output: CommandOutput) -> LintResult:
        """Collect SwiftFormat diagnostics from stderr.

        Args:
            directory: Directory SwiftFormat ran in.
            output: Raw output returned by :meth:`lint`.

        Returns:
            LintResult: Success mirrors the exit status; findings are listed
            under ``error`` in the order SwiftFormat printed them.
        """

        builder = LintResultBuilder(is_success=output.ok)
        builder.extend(self.diagnostic_severity, parse_swiftformat(output.stderr, directory))
        return builder.build()


__all__ = ["SwiftFormatAdapter"]
