"""
sfdisk dump parser.

Parses the output of `sfdisk -d` into a PartitionTable. Partition entries
look like:

    /dev/sda1 : start=        2048, size=     1048576, type=C12A7328-..., uuid=..., name="EFI System"

Fields are comma separated; commas inside double quotes do not split.
"""

from __future__ import annotations

import re

from sfdisksort.core.errors import MalformedNumericFieldError, UnrecognizedLineError
from sfdisksort.core.logging import get_logger
from sfdisksort.core.models import LineKind, PartitionRecord, PartitionTable, PassthroughLine
from sfdisksort.dump.classifier import classify_line
from sfdisksort.dump.devices import parse_device_name

logger = get_logger(__name__)

# sfdisk writes " : " between the device and its fields; by-path device
# names may contain colons themselves, so try that form first.
ENTRY_LINE_PATTERNS = [
    re.compile(r"^\s*(?P<label>/dev/\S+)\s+:\s*(?P<fields>.*?)\s*$"),
    re.compile(r"^\s*(?P<label>/dev/[^\s:]+)\s*:\s*(?P<fields>.*?)\s*$"),
]

UNSIGNED_RE = re.compile(r"[0-9]+")


def split_fields(text: str) -> list[str] | None:
    """
    Split the field part of an entry on commas outside double quotes.

    Returns None if a double quote is left open.
    """
    fields: list[str] = []
    current: list[str] = []
    quoted = False

    for char in text:
        if char == '"':
            quoted = not quoted
        elif char == "," and not quoted:
            fields.append("".join(current).strip())
            current = []
            continue
        current.append(char)

    if quoted:
        return None

    fields.append("".join(current).strip())
    return [f for f in fields if f]


def parse_unsigned(field: str, value: str, line_number: int, line: str) -> int:
    """Parse a start/size value as an unsigned decimal integer."""
    value = value.strip()
    if not UNSIGNED_RE.fullmatch(value):
        raise MalformedNumericFieldError(field, value, line_number, line)
    return int(value)


def parse_partition_line(line: str, line_number: int = 0) -> PartitionRecord:
    """
    Parse one partition entry line.

    Raises MalformedNumericFieldError for a non-numeric start/size and
    UnrecognizedLineError when the line does not follow the entry grammar.
    """
    candidates = [m for m in (p.match(line) for p in ENTRY_LINE_PATTERNS) if m]
    if not candidates:
        raise UnrecognizedLineError("not a partition entry", line_number, line)

    match = next(
        (m for m in candidates if parse_device_name(m.group("label")) is not None),
        candidates[0],
    )
    label = match.group("label")
    if parse_device_name(label) is None:
        raise UnrecognizedLineError(
            f"device {label} has no partition number", line_number, line
        )

    fields = split_fields(match.group("fields"))
    if fields is None:
        raise UnrecognizedLineError("unterminated quote", line_number, line)

    start: int | None = None
    size: int | None = None
    part_type: str | None = None
    attrs: list[str] = []

    for field in fields:
        key, sep, value = field.partition("=")
        key = key.strip()
        if sep and key == "start" and start is None:
            start = parse_unsigned("start", value, line_number, line)
        elif sep and key == "size" and size is None:
            size = parse_unsigned("size", value, line_number, line)
        elif sep and key == "type" and part_type is None:
            part_type = value.strip()
        else:
            attrs.append(field)

    if start is None:
        raise UnrecognizedLineError("missing start= field", line_number, line)

    return PartitionRecord(
        label=label,
        start=start,
        size=size,
        type=part_type,
        attrs=attrs,
        line_number=line_number,
    )


def parse_header_line(line: str) -> tuple[str, str] | None:
    """
    Parse a header line.

    Example input:
    sector-size: 512
    """
    if ":" not in line:
        return None
    key, value = line.split(":", 1)
    return key.strip(), value.strip()


def split_dump_lines(text: str) -> list[str]:
    """
    Split a dump on "\\n" only.

    Carriage returns, form feeds and other characters that str.splitlines()
    treats as breaks stay part of the line text.
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def parse_dump(text: str, strict: bool = False) -> PartitionTable:
    """
    Parse a whole sfdisk dump.

    In strict mode any line that is not a header, comment, blank line or
    valid partition entry aborts the parse. Otherwise such lines are kept
    as passthrough lines. Malformed start/size values always abort.
    """
    table = PartitionTable(trailing_newline=text.endswith("\n"))

    for line_number, line in enumerate(split_dump_lines(text), start=1):
        kind = classify_line(line)

        if kind == LineKind.PARTITION:
            try:
                record = parse_partition_line(line.removesuffix("\r"), line_number)
            except UnrecognizedLineError as e:
                if strict:
                    raise
                logger.warning(
                    "Passing through unparsable partition entry",
                    line_number=line_number,
                    reason=e.message,
                )
                table.passthrough.append(
                    PassthroughLine(line, line_number, LineKind.UNRECOGNIZED)
                )
                continue

            logger.debug(
                "Parsed partition",
                label=record.label,
                start=record.start,
                size=record.size,
                line_number=line_number,
            )
            table.partitions.append(record)
            continue

        if kind == LineKind.UNRECOGNIZED:
            if strict:
                raise UnrecognizedLineError("unrecognized line", line_number, line)
            logger.warning("Passing through unrecognized line", line_number=line_number)
        elif kind == LineKind.HEADER:
            header = parse_header_line(line)
            if header is not None:
                table.headers[header[0]] = header[1]

        table.passthrough.append(PassthroughLine(line, line_number, kind))

    logger.debug(
        "Classified dump",
        partitions=len(table.partitions),
        passthrough=len(table.passthrough),
    )
    return table
