# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared parser infrastructure and helper utilities."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterator
from pathlib import Path
from typing import Final

LOGGER = logging.getLogger(__name__)

_SEPARATORS: Final[str] = "/\\"


def _normalise_newlines(text: str) -> str:
    """Rewrite ``\\r\\n`` and lone ``\\r`` as ``\\n`` so ``$`` anchors behave per line."""

    return text.replace("\r\n", "\n").replace("\r", "\n")


def iter_stream_matches(text: str, pattern: re.Pattern[str]) -> Iterator[re.Match[str]]:
    """Yield non-overlapping matches of ``pattern`` across a whole output stream.

    ``pattern`` is expected to be compiled with :data:`re.MULTILINE` so that
    ``^`` and ``$`` anchor at line boundaries.

    Args:
        text: Raw stream text emitted by a tool.
        pattern: Compiled regular expression describing one diagnostic line.

    Yields:
        re.Match[str]: Matches in stream order.
    """

    if not text:
        return
    yield from pattern.finditer(_normalise_newlines(text))


def _strip_prefix(path: str, root: str) -> str | None:
    trimmed = root.rstrip(_SEPARATORS)
    if not trimmed:
        # filesystem root
        if root and path.startswith(root[0]):
            return path[1:]
        return None
    if path.startswith(trimmed) and path[len(trimmed) : len(trimmed) + 1] in ("/", "\\"):
        return path[len(trimmed) + 1 :]
    return None


def relative_to_root(path: str, root: Path | str) -> str:
    """Return ``path`` with the lint root and one separator removed.

    The root is matched as given first and then in its absolute form, since
    tools usually print absolute paths. A path outside the root is logged and
    returned unchanged.

    Args:
        path: Path as printed by the tool.
        root: Directory the tool was invoked in.

    Returns:
        str: Root-relative path, or ``path`` itself when it lies outside the root.
    """

    candidates = [str(root)]
    absolute = os.path.abspath(root)
    if absolute not in candidates:
        candidates.append(absolute)
    for candidate in candidates:
        stripped = _strip_prefix(path, candidate)
        if stripped is not None:
            return stripped
    LOGGER.warning("diagnostic path %s is outside lint root %s; reporting it unchanged", path, root)
    return path


__all__ = ["iter_stream_matches", "relative_to_root"]
