# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models exchanged between adapters and the orchestrator."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .severity import Severity, result_field


class Finding(BaseModel):
    """Single diagnostic addressed to a file and a line range.

    Lines are 1-based; ``0`` is kept when a tool reports it for file-level issues.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    path: str
    first_line: int = Field(alias="firstLine", ge=0)
    last_line: int = Field(alias="lastLine", ge=0)
    message: str

    @model_validator(mode="after")
    def _check_line_range(self) -> Finding:
        """Ensure the range is not inverted.

        Returns:
            Finding: The validated finding.

        Raises:
            ValueError: If ``last_line`` precedes ``first_line``.
        """

        if self.last_line < self.first_line:
            raise ValueError(f"last_line {self.last_line} precedes first_line {self.first_line}")
        return self


class LintResult(BaseModel):
    """Normalised outcome of a single adapter invocation.

    ``is_success`` mirrors the exit status of the external process only. It is
    deliberately independent from the collected findings: the orchestrator
    decides how to present a failing run without findings, or a passing run
    that still reported something.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    is_success: bool = Field(alias="isSuccess")
    error: tuple[Finding, ...] = Field(default_factory=tuple)
    warning: tuple[Finding, ...] = Field(default_factory=tuple)

    @property
    def finding_count(self) -> int:
        """Return the number of findings across both severities."""

        return len(self.error) + len(self.warning)

    def to_json(self) -> str:
        """Serialise the result using the orchestrator's camelCase field names."""

        return self.model_dump_json(by_alias=True, indent=2)


class CommandOutput(BaseModel):
    """Raw result of an external process execution."""

    model_config = ConfigDict(frozen=True)

    status: int
    stdout: str = ""
    stderr: str = ""

    @field_validator("stdout", "stderr", mode="before")
    @classmethod
    def _coerce_stream(cls, value: str | bytes | None) -> str:
        """Normalise captured streams to text.

        Args:
            value: Stream payload as captured by the runner.

        Returns:
            str: Decoded text, empty when nothing was captured.
        """

        if value is None:
            return ""
        if isinstance(value, bytes):
            return value.decode(errors="replace")
        return value

    @property
    def ok(self) -> bool:
        """Return ``True`` when the process exited with status ``0``."""

        return self.status == 0


@dataclass(slots=True)
class LintResultBuilder:
    """Accumulate findings by severity before freezing them into a :class:`LintResult`."""

    is_success: bool
    _buckets: dict[Severity, list[Finding]] = field(
        default_factory=lambda: {severity: [] for severity in Severity},
    )

    def add(self, severity: Severity, finding: Finding) -> None:
        """Append ``finding`` to the bucket for ``severity`` preserving order."""

        self._buckets[severity].append(finding)

    def extend(self, severity: Severity, findings: Sequence[Finding]) -> None:
        """Append each of ``findings`` to the bucket for ``severity``."""

        self._buckets[severity].extend(findings)

    def build(self) -> LintResult:
        """Return the immutable result populated with the collected findings.

        Returns:
            LintResult: Frozen result ready to hand to the orchestrator.
        """

        payload = {result_field(severity): tuple(items) for severity, items in self._buckets.items()}
        return LintResult(is_success=self.is_success, **payload)


__all__ = ["CommandOutput", "Finding", "LintResult", "LintResultBuilder"]
