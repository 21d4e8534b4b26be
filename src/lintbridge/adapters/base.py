# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Contract implemented by every lint adapter."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar

from ..config import LintOptions
from ..core.models import CommandOutput, LintResult
from ..core.runtime import AvailabilityChecker, ProcessRunner, SubprocessRunner, command_exists
from ..errors import ConfigurationError, SetupError


class LinterAdapter(ABC):
    """Integrate one external linter behind ``verify_setup``/``lint``/``parse_output``.

    Adapters accept the full option set of the shared contract and ignore the
    parameters their tool cannot honour, so they stay interchangeable.
    """

    name: ClassVar[str]
    executable: ClassVar[str]
    supported_extensions: ClassVar[tuple[str, ...]]

    def __init__(
        self,
        *,
        runner: ProcessRunner | None = None,
        availability: AvailabilityChecker = command_exists,
    ) -> None:
        """Bind the adapter to its process collaborators.

        Args:
            runner: Executes the linter; defaults to :class:`SubprocessRunner`.
            availability: Probes ``PATH`` for the linter executable.
        """

        self._runner = runner or SubprocessRunner()
        self._availability = availability

    def verify_setup(self, directory: Path, command_prefix: str = "") -> None:
        """Raise :class:`SetupError` when the linter executable is missing.

        ``directory`` and ``command_prefix`` are part of the shared contract;
        the availability check depends on neither.
        """

        del directory, command_prefix
        if not self._availability(self.executable):
            raise SetupError(f"{self.name} is not installed")

    def check_extensions(self, options: LintOptions) -> None:
        """Reject extension sets other than :attr:`supported_extensions`."""

        if options.extensions != self.supported_extensions:
            raise ConfigurationError(f"{self.name} error: File extensions are not configurable")

    @abstractmethod
    def lint(self, options: LintOptions) -> CommandOutput:
        """Run the linter and return its raw output."""

    @abstractmethod
    def parse_output(self, directory: Path, output: CommandOutput) -> LintResult:
        """Translate raw linter output into a :class:`LintResult`."""


__all__ = ["LinterAdapter"]
