# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parser for SwiftFormat ``--lint`` diagnostics."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Final

from ..core.models import Finding
from .base import iter_stream_matches, relative_to_root

# The severity word is matched but never inspected; SwiftFormat only emits
# "warning". Messages must end with a literal period to match.
SWIFTFORMAT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?P<path>.*):(?P<line>[0-9]+):[0-9]+: \w+: \((?P<rule>\w+)\) (?P<message>.*)\.$",
    re.MULTILINE,
)


def parse_swiftformat(stderr: str, root: Path | str) -> list[Finding]:
    """Parse SwiftFormat stderr into findings ordered as emitted.

    Args:
        stderr: Error stream captured from ``swiftformat --lint``.
        root: Directory SwiftFormat was invoked in.

    Returns:
        list[Finding]: Single-line findings whose message carries the rule id.
    """

    findings: list[Finding] = []
    for match in iter_stream_matches(stderr, SWIFTFORMAT_PATTERN):
        line_no = int(match.group("line"))
        findings.append(
            Finding(
                path=relative_to_root(match.group("path"), root),
                first_line=line_no,
                last_line=line_no,
                message=f"{match.group('message')} ({match.group('rule')})",
            ),
        )
    return findings


__all__ = ["SWIFTFORMAT_PATTERN", "parse_swiftformat"]
