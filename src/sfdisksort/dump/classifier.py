"""
Line classification for sfdisk dumps.

Purely syntactic: the result depends on the line text only, never on its
position in the dump.
"""

from __future__ import annotations

import re

from sfdisksort.core.models import LineKind

# "/dev/sda1 : start=..." -- device path token, then the colon separator
PARTITION_LINE_RE = re.compile(r"^\s*/dev/\S+?\s*:")

# "label: gpt", "label-id: ...", "sector-size: 512"
HEADER_LINE_RE = re.compile(r"^\s*[A-Za-z][A-Za-z0-9-]*\s*:")


def classify_line(line: str) -> LineKind:
    """Tag one dump line with its LineKind."""
    stripped = line.strip()
    if not stripped:
        return LineKind.BLANK
    if stripped.startswith("#"):
        return LineKind.COMMENT
    if PARTITION_LINE_RE.match(line):
        return LineKind.PARTITION
    if HEADER_LINE_RE.match(line):
        return LineKind.HEADER
    return LineKind.UNRECOGNIZED
