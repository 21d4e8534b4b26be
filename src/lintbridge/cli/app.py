# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application running a single lint adapter against a directory."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Final

import typer
from rich import box
from rich.table import Table

from ..adapters import DEFAULT_REGISTRY, LinterAdapter
from ..config import LintOptions, load_project_options
from ..core.logging import configure_logging, fail, info, ok, section, warn
from ..core.models import LintResult
from ..errors import LintBridgeError
from ..runner import run_adapter
from ..runtime.console import console_manager, detect_tty

EXIT_LINT_FAILED: Final[int] = 1
EXIT_USAGE_ERROR: Final[int] = 2

app = typer.Typer(
    name="lintbridge",
    help="Run an external linter and normalise its diagnostics.",
    add_completion=False,
    no_args_is_help=True,
)


def _build_adapter(key: str) -> LinterAdapter:
    """Instantiate the adapter registered under ``key`` with default collaborators."""

    return DEFAULT_REGISTRY.get_adapter(key)()


def _render_table(result: LintResult, *, use_emoji: bool) -> None:
    table = Table(box=box.SIMPLE, expand=True)
    table.add_column("Severity", style="bold")
    table.add_column("Location", overflow="fold")
    table.add_column("Message", overflow="fold")
    for severity, findings in (("error", result.error), ("warning", result.warning)):
        for finding in findings:
            table.add_row(severity, f"{finding.path}:{finding.first_line}", finding.message)
    console_manager().get(color=detect_tty(), emoji=use_emoji).print(table)


@app.command("run")
def run(
    root: Annotated[
        Path,
        typer.Argument(exists=True, file_okay=False, resolve_path=True, help="Lint root directory."),
    ] = Path("."),
    adapter: Annotated[str, typer.Option("--adapter", "-a", help="Registered adapter key.")] = "swiftformat",
    extensions: Annotated[
        list[str] | None,
        typer.Option("--extension", "-e", help="File extension to lint (repeatable)."),
    ] = None,
    fix: Annotated[bool | None, typer.Option("--fix/--no-fix", help="Rewrite files instead of reporting.")] = None,
    prefix: Annotated[str | None, typer.Option("--prefix", help="Command prefix, e.g. 'mint run'.")] = None,
    args: Annotated[str | None, typer.Option("--args", help="Extra arguments passed to the linter.")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the result as JSON.")] = False,
    use_emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji output.")] = True,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log command lines and exit statuses.")] = False,
) -> None:
    """Verify, run and parse one adapter against ROOT.

    Raises:
        typer.Exit: Always raised with ``0`` on success, ``1`` when the linter
            failed and ``2`` on setup or configuration errors.
    """

    configure_logging(verbose=verbose)
    try:
        selected = _build_adapter(adapter)
        payload: dict[str, object] = dict(load_project_options(root))
        overrides = {"fix": fix, "prefix": prefix, "args": args}
        payload.update({key: value for key, value in overrides.items() if value is not None})
        payload["dir"] = root
        payload["extensions"] = tuple(extensions) if extensions else selected.supported_extensions
        result = run_adapter(selected, LintOptions.from_mapping(payload))
    except LintBridgeError as exc:
        fail(str(exc), use_emoji=use_emoji)
        raise typer.Exit(code=EXIT_USAGE_ERROR) from exc

    if as_json:
        typer.echo(result.to_json())
    else:
        section(selected.name, use_color=detect_tty())
        info(f"Lint root: {root}", use_emoji=use_emoji)
        if result.finding_count:
            _render_table(result, use_emoji=use_emoji)
        if result.is_success:
            ok(f"{selected.name} passed with {result.finding_count} finding(s)", use_emoji=use_emoji)
        else:
            warn(f"{selected.name} failed with {result.finding_count} finding(s)", use_emoji=use_emoji)
    raise typer.Exit(code=0 if result.is_success else EXIT_LINT_FAILED)


@app.command("adapters")
def list_adapters(
    use_emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji output.")] = True,
) -> None:
    """List registered adapters and whether their executable is installed."""

    table = Table(box=box.SIMPLE)
    table.add_column("Key", style="bold")
    table.add_column("Linter")
    table.add_column("Executable")
    table.add_column("Installed")
    for key in DEFAULT_REGISTRY:
        adapter = _build_adapter(key)
        try:
            adapter.verify_setup(Path.cwd())
        except LintBridgeError:
            installed = "no"
        else:
            installed = "yes"
        table.add_row(key, adapter.name, adapter.executable, installed)
    console_manager().get(color=detect_tty(), emoji=use_emoji).print(table)


def main() -> None:
    """Console script entry point."""

    app()


__all__ = ["app", "main"]
