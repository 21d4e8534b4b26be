# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the SwiftFormat adapter lifecycle."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

from lintbridge.adapters import SwiftFormatAdapter
from lintbridge.config import LintOptions
from lintbridge.core.models import CommandOutput
from lintbridge.errors import ConfigurationError, SetupError

DIAGNOSTIC = "{root}/a/b.swift:12:4: warning: (trailingComma) Unneeded trailing comma."


def _options(tmp_path: Path, **overrides) -> LintOptions:
    return LintOptions(dir=tmp_path, extensions=("swift",), **overrides)


@pytest.mark.parametrize("prefix", ["", "mint run", "xcrun --sdk macosx"])
def test_verify_setup_passes_when_installed(availability, prefix: str, tmp_path: Path) -> None:
    adapter = SwiftFormatAdapter(availability=availability)
    assert adapter.verify_setup(tmp_path, prefix) is None


@pytest.mark.parametrize("prefix", ["", "mint run"])
def test_verify_setup_raises_when_missing(installed: list[str], availability, prefix: str, tmp_path: Path) -> None:
    installed.clear()
    adapter = SwiftFormatAdapter(availability=availability)

    with pytest.raises(SetupError, match="SwiftFormat is not installed"):
        adapter.verify_setup(tmp_path, prefix)


def test_verify_setup_probes_executable_only(tmp_path: Path) -> None:
    probed: list[str] = []

    def _probe(executable: str) -> bool:
        probed.append(executable)
        return True

    SwiftFormatAdapter(availability=_probe).verify_setup(tmp_path, "mint run")

    assert probed == ["swiftformat"]


def test_lint_builds_check_command(fake_runner, tmp_path: Path) -> None:
    adapter = SwiftFormatAdapter(runner=fake_runner)

    adapter.lint(_options(tmp_path))

    assert fake_runner.calls == [(["swiftformat", "--lint", "."], tmp_path, True)]


def test_lint_fix_mode_omits_lint_flag(fake_runner, tmp_path: Path) -> None:
    adapter = SwiftFormatAdapter(runner=fake_runner)

    adapter.lint(_options(tmp_path, fix=True))

    command, _, _ = fake_runner.calls[0]
    assert "--lint" not in command
    assert command == ["swiftformat", "."]


def test_lint_includes_prefix_and_args(fake_runner, tmp_path: Path) -> None:
    adapter = SwiftFormatAdapter(runner=fake_runner)

    adapter.lint(_options(tmp_path, prefix="mint run", args="--swiftversion 5.9 --config '.swift format'"))

    command, _, _ = fake_runner.calls[0]
    assert command == [
        "mint",
        "run",
        "swiftformat",
        "--lint",
        "--swiftversion",
        "5.9",
        "--config",
        ".swift format",
        ".",
    ]


def test_lint_ignores_files_and_linter_prefix(fake_runner, tmp_path: Path) -> None:
    adapter = SwiftFormatAdapter(runner=fake_runner)

    adapter.lint(_options(tmp_path, files="Sources/*.swift", linter_prefix="time"))

    command, _, _ = fake_runner.calls[0]
    assert command == ["swiftformat", "--lint", "."]


@pytest.mark.parametrize("extensions", [("swift", "kt"), ("kt",), ()])
def test_lint_rejects_other_extensions(fake_runner, tmp_path: Path, extensions: tuple[str, ...]) -> None:
    adapter = SwiftFormatAdapter(runner=fake_runner)

    with pytest.raises(ConfigurationError, match="File extensions are not configurable"):
        adapter.lint(LintOptions(dir=tmp_path, extensions=extensions))

    assert fake_runner.calls == []


def test_lint_returns_runner_output_unchanged(fake_runner, tmp_path: Path) -> None:
    fake_runner.output = CommandOutput(status=1, stdout="", stderr="boom")
    adapter = SwiftFormatAdapter(runner=fake_runner)

    assert adapter.lint(_options(tmp_path)) == fake_runner.output


def test_parse_output_classifies_findings_as_errors(tmp_path: Path) -> None:
    output = CommandOutput(status=1, stderr=DIAGNOSTIC.format(root=tmp_path))

    result = SwiftFormatAdapter().parse_output(tmp_path, output)

    assert result.is_success is False
    assert result.warning == ()
    assert len(result.error) == 1
    finding = result.error[0]
    assert (finding.path, finding.first_line, finding.last_line) == ("a/b.swift", 12, 12)
    assert finding.message == "Unneeded trailing comma (trailingComma)"


def test_parse_output_success_with_findings(tmp_path: Path) -> None:
    output = CommandOutput(status=0, stderr=DIAGNOSTIC.format(root=tmp_path))

    result = SwiftFormatAdapter().parse_output(tmp_path, output)

    assert result.is_success is True
    assert len(result.error) == 1


def test_parse_output_failure_without_findings(tmp_path: Path) -> None:
    output = CommandOutput(status=70, stdout="", stderr="error: Unknown option --bogus\n")

    result = SwiftFormatAdapter().parse_output(tmp_path, output)

    assert result.is_success is False
    assert result.error == ()


@pytest.mark.parametrize("status", [0, 1])
def test_parse_output_empty_stderr(tmp_path: Path, status: int) -> None:
    result = SwiftFormatAdapter().parse_output(tmp_path, CommandOutput(status=status))

    assert result.error == ()
    assert result.is_success is (status == 0)


def test_parse_output_ignores_stdout(tmp_path: Path) -> None:
    output = CommandOutput(status=1, stdout=DIAGNOSTIC.format(root=tmp_path), stderr="")

    assert SwiftFormatAdapter().parse_output(tmp_path, output).error == ()


def test_parse_output_keeps_line_zero(tmp_path: Path) -> None:
    output = CommandOutput(status=1, stderr=f"{tmp_path}/a.swift:0:0: warning: (rule) Msg.\n")

    result = SwiftFormatAdapter().parse_output(tmp_path, output)

    assert [(f.path, f.first_line, f.last_line) for f in result.error] == [("a.swift", 0, 0)]


def test_lint_returns_undecodable_stderr_as_data(tmp_path: Path, monkeypatch) -> None:
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    executable = bin_dir / "swiftformat"
    executable.write_text(
        f"#!{sys.executable}\n"
        "import os, sys\n"
        "sys.stderr.buffer.write(os.getcwd().encode() + b'/caf\\xe9.swift:1:1: warning: (indent) Indent.\\n')\n"
        "sys.exit(1)\n",
        encoding="utf-8",
    )
    executable.chmod(0o755)
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    adapter = SwiftFormatAdapter()

    root = tmp_path.resolve()
    output = adapter.lint(_options(root))
    result = adapter.parse_output(root, output)

    assert output.status == 1
    assert "caf�.swift" in output.stderr
    assert result.is_success is False
    assert [(f.path, f.message) for f in result.error] == [("caf�.swift", "Indent (indent)")]
