# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Invocation options shared by every lint adapter."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PROJECT_TABLE: Final[str] = "lintbridge"
DEFAULT_FILES: Final[str] = '"."'
_PROJECT_KEYS: Final[frozenset[str]] = frozenset({"args", "fix", "prefix"})


class LintOptions(BaseModel):
    """Normalised options passed to :meth:`LinterAdapter.lint`.

    ``files`` and ``linter_prefix`` are part of the shared adapter contract;
    individual adapters document whether they honour them.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    dir: Path
    extensions: tuple[str, ...]
    args: str = ""
    fix: bool = False
    prefix: str = ""
    files: str = DEFAULT_FILES
    linter_prefix: str = Field(default="", alias="linterPrefix")

    @field_validator("extensions", mode="before")
    @classmethod
    def _coerce_extensions(cls, value: object) -> object:
        """Accept a single extension string as a one-element sequence.

        Values other than strings, lists and tuples are passed through so that
        pydantic reports them as validation errors.
        """

        if isinstance(value, str):
            return (value,)
        if isinstance(value, list):
            return tuple(value)
        return value

    @classmethod
    def from_mapping(cls, payload: Mapping[str, object]) -> LintOptions:
        """Build options from an untyped mapping such as decoded JSON.

        Args:
            payload: Option values keyed by field name or camelCase alias.

        Returns:
            LintOptions: Validated options.

        Raises:
            ConfigurationError: If the payload fails validation.
        """

        try:
            return cls.model_validate(dict(payload))
        except ValidationError as exc:
            raise ConfigurationError(f"invalid lint options: {exc}") from exc


def load_project_options(root: Path) -> dict[str, str | bool]:
    """Return ``[tool.lintbridge]`` defaults declared in ``root/pyproject.toml``.

    Only ``args``, ``fix`` and ``prefix`` may be configured at project level.

    Args:
        root: Lint root that may contain a ``pyproject.toml``.

    Returns:
        dict[str, str | bool]: Configured defaults, empty when none are declared.

    Raises:
        ConfigurationError: If the file cannot be parsed or declares unknown
            or mistyped keys.
    """

    path = root / PYPROJECT_FILENAME
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"{path}: {exc}") from exc

    tools = document.get("tool", {})
    table = tools.get(PROJECT_TABLE, {}) if isinstance(tools, Mapping) else {}
    if not isinstance(table, Mapping):
        raise ConfigurationError(f"{path}: [tool.{PROJECT_TABLE}] must be a table")
    unknown = sorted(set(table) - _PROJECT_KEYS)
    if unknown:
        raise ConfigurationError(f"{path}: unknown [tool.{PROJECT_TABLE}] keys: {', '.join(unknown)}")

    defaults: dict[str, str | bool] = {}
    for key, value in table.items():
        expected = bool if key == "fix" else str
        if not isinstance(value, expected):
            raise ConfigurationError(f"{path}: '{key}' must be a {expected.__name__}")
        defaults[key] = value
    return defaults


__all__ = ["DEFAULT_FILES", "LintOptions", "load_project_options"]
