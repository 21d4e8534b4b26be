# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution and executable discovery."""

from __future__ import annotations

import logging
import shutil

# Bandit: subprocess usage is intentional; we provide a controlled wrapper around
# external linter execution, normalising arguments and disabling ``shell=True``.
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from pathlib import Path
from subprocess import CompletedProcess
from typing import Final, Protocol, runtime_checkable

from ..models import CommandOutput

LOGGER = logging.getLogger(__name__)

TIMEOUT_EXIT_STATUS: Final[int] = 124
COMMAND_NOT_FOUND_STATUS: Final[int] = 127


@dataclass(frozen=True, slots=True)
class CommandOptions:
    """Immutable command execution options."""

    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    check: bool = True
    capture_output: bool = False
    text: bool = True
    encoding_errors: str = "replace"
    timeout: float | None = None
    discard_stdin: bool = False

    def __post_init__(self) -> None:
        if self.timeout is not None and self.timeout < 0:
            raise ValueError("timeout must be non-negative")


class SubprocessExecutionError(RuntimeError):
    """Raised when a subprocess exits with a non-zero status while ``check`` is true."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stdout: str | None,
        stderr: str | None,
    ) -> None:
        """Initialise the error with captured subprocess metadata.

        Args:
            command: Normalised command sequence that was executed.
            returncode: Exit status reported by the subprocess.
            stdout: Captured standard output stream.
            stderr: Captured standard error stream.
        """
        super().__init__(
            f"Command '{command[0]}' exited with status {returncode}. stderr: {stderr or '<none>'}",
        )
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


def _ensure_text(value: str | bytes | None) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return value.decode(errors="replace")


def _normalize_args(args: Sequence[str]) -> list[str]:
    """Resolve the executable of ``args`` against ``PATH``.

    Args:
        args: Raw command arguments supplied by the caller.

    Returns:
        list[str]: Argument list whose head is an absolute executable path.

    Raises:
        ValueError: If no arguments are provided.
        FileNotFoundError: If the executable cannot be resolved.
    """

    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def run_command(args: Sequence[str], *, options: CommandOptions | None = None) -> CompletedProcess[str]:
    """Execute ``args`` after normalising the executable path.

    Args:
        args: Command and argument sequence to execute.
        options: Options configuring execution semantics.

    Returns:
        CompletedProcess: Subprocess execution metadata. A timeout is reported
        as exit status ``124`` with a note appended to stderr.

    Raises:
        FileNotFoundError: If the executable cannot be resolved on ``PATH``.
        SubprocessExecutionError: When ``check`` is true and the process exits
            with a non-zero status.
    """

    normalized = _normalize_args(args)
    resolved = options or CommandOptions()

    try:
        # Bandit: argument lists are passed directly without shell expansion.
        completed: CompletedProcess[str] = subprocess.run(  # nosec B603
            normalized,
            cwd=str(resolved.cwd) if resolved.cwd is not None else None,
            env=dict(resolved.env) if resolved.env is not None else None,
            check=False,
            capture_output=resolved.capture_output,
            text=resolved.text,
            errors=resolved.encoding_errors if resolved.text else None,
            timeout=resolved.timeout,
            stdin=subprocess.DEVNULL if resolved.discard_stdin else None,
        )
    except subprocess.TimeoutExpired as exc:
        stdout = _ensure_text(exc.stdout) or ""
        stderr = _ensure_text(exc.stderr)
        timeout_msg = (
            f"Command timed out after {resolved.timeout:.1f}s" if resolved.timeout is not None else "Command timed out"
        )
        combined_stderr = f"{stderr}\n{timeout_msg}" if stderr else timeout_msg
        completed = subprocess.CompletedProcess(
            args=list(normalized),
            returncode=TIMEOUT_EXIT_STATUS,
            stdout=stdout,
            stderr=combined_stderr,
        )

    if resolved.check and completed.returncode != 0:
        raise SubprocessExecutionError(
            normalized,
            completed.returncode,
            completed.stdout if isinstance(completed.stdout, str) else None,
            completed.stderr if isinstance(completed.stderr, str) else None,
        )

    return completed


@runtime_checkable
class ProcessRunner(Protocol):
    """Execute a command inside a directory and capture its streams."""

    def run(self, command: Sequence[str], *, cwd: Path, ignore_errors: bool = False) -> CommandOutput:
        """Run ``command`` in ``cwd`` and return its exit status and output.

        Args:
            command: Argument sequence to execute.
            cwd: Working directory for the process.
            ignore_errors: When ``True`` a non-zero exit is returned as data
                instead of raising.

        Returns:
            CommandOutput: Exit status together with captured stdout and stderr.
        """

        raise NotImplementedError


@runtime_checkable
class AvailabilityChecker(Protocol):
    """Probe whether an executable resolves on the system path."""

    def __call__(self, executable: str) -> bool:
        """Return ``True`` when ``executable`` can be resolved."""

        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class SubprocessRunner:
    """Default :class:`ProcessRunner` backed by :func:`run_command`."""

    options: CommandOptions = CommandOptions(capture_output=True, discard_stdin=True)

    def run(self, command: Sequence[str], *, cwd: Path, ignore_errors: bool = False) -> CommandOutput:
        """Execute ``command`` in ``cwd``.

        Args:
            command: Argument sequence to execute.
            cwd: Working directory for the process.
            ignore_errors: When ``True`` non-zero exits and a missing executable
                are reported as output rather than raised.

        Returns:
            CommandOutput: Captured exit status and streams.

        Raises:
            FileNotFoundError: If the executable is missing and ``ignore_errors`` is false.
            SubprocessExecutionError: If the process fails and ``ignore_errors`` is false.
        """

        options = replace(self.options, cwd=cwd, check=not ignore_errors)
        try:
            completed = run_command(command, options=options)
        except FileNotFoundError as exc:
            if not ignore_errors:
                raise
            LOGGER.debug("executable missing for %s: %s", list(command), exc)
            return CommandOutput(status=COMMAND_NOT_FOUND_STATUS, stdout="", stderr=str(exc))
        LOGGER.debug("%s exited with status %d", command[0], completed.returncode)
        return CommandOutput(status=completed.returncode, stdout=completed.stdout, stderr=completed.stderr)


def command_exists(executable: str) -> bool:
    """Return ``True`` when ``executable`` resolves on ``PATH``.

    Args:
        executable: Program name to look up.

    Returns:
        bool: ``True`` when :func:`shutil.which` finds the executable.
    """

    return shutil.which(executable) is not None


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
