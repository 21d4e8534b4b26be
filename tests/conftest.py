# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from lintbridge.core.models import CommandOutput


@dataclass
class FakeRunner:
    """Record commands instead of executing them."""

    output: CommandOutput = field(default_factory=lambda: CommandOutput(status=0))
    calls: list[tuple[list[str], Path, bool]] = field(default_factory=list)

    def run(self, command: Sequence[str], *, cwd: Path, ignore_errors: bool = False) -> CommandOutput:
        self.calls.append((list(command), cwd, ignore_errors))
        return self.output


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def installed() -> list[str]:
    """Executables reported as present by ``availability``."""
    return ["swiftformat"]


@pytest.fixture
def availability(installed: list[str]):
    return lambda executable: executable in installed
