# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for result models and the result builder."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from lintbridge.core.models import CommandOutput, Finding, LintResult, LintResultBuilder
from lintbridge.core.severity import Severity


def test_finding_rejects_inverted_range() -> None:
    with pytest.raises(ValidationError):
        Finding(path="a.swift", first_line=5, last_line=4, message="bad")


def test_finding_rejects_negative_line() -> None:
    with pytest.raises(ValidationError):
        Finding(path="a.swift", first_line=-1, last_line=-1, message="bad")


def test_finding_accepts_line_zero() -> None:
    finding = Finding(path="a.swift", first_line=0, last_line=0, message="file level")
    assert finding.first_line == finding.last_line == 0


def test_builder_preserves_order_and_buckets() -> None:
    builder = LintResultBuilder(is_success=False)
    first = Finding(path="b.swift", first_line=3, last_line=3, message="one")
    second = Finding(path="a.swift", first_line=1, last_line=1, message="two")
    builder.add(Severity.ERROR, first)
    builder.add(Severity.ERROR, second)

    result = builder.build()

    assert result.error == (first, second)
    assert result.warning == ()
    assert result.is_success is False
    assert result.finding_count == 2


def test_result_is_frozen() -> None:
    result = LintResult(is_success=True)
    with pytest.raises(ValidationError):
        result.is_success = False


def test_result_json_uses_camel_case() -> None:
    result = LintResult(
        is_success=True,
        error=(Finding(path="a.swift", first_line=2, last_line=2, message="msg (rule)"),),
    )

    payload = json.loads(result.to_json())

    assert payload == {
        "isSuccess": True,
        "error": [{"path": "a.swift", "firstLine": 2, "lastLine": 2, "message": "msg (rule)"}],
        "warning": [],
    }


def test_result_accepts_camel_case_payload() -> None:
    result = LintResult.model_validate(
        {"isSuccess": False, "error": [{"path": "x", "firstLine": 1, "lastLine": 1, "message": "m"}]},
    )
    assert result.error[0].first_line == 1


def test_command_output_decodes_bytes() -> None:
    output = CommandOutput(status=1, stdout=None, stderr=b"boom")
    assert output.stdout == ""
    assert output.stderr == "boom"
    assert output.ok is False


def test_command_output_replaces_undecodable_bytes() -> None:
    output = CommandOutput(status=1, stderr=b"/x/caf\xe9.swift")
    assert output.stderr == "/x/caf�.swift"
