"""
sfdisk dump renderer.

Writes a PartitionTable back in the syntax `sfdisk` accepts on stdin.
"""

from __future__ import annotations

from sfdisksort.core.models import PartitionRecord, PartitionTable

# sfdisk -d prints start and size as %12ju
DEFAULT_FIELD_WIDTH = 12


def render_partition(record: PartitionRecord, field_width: int = DEFAULT_FIELD_WIDTH) -> str:
    """Render one partition entry line."""
    fields = [f"start={str(record.start).rjust(field_width)}"]
    if record.size is not None:
        fields.append(f"size={str(record.size).rjust(field_width)}")
    if record.type is not None:
        fields.append(f"type={record.type}")
    fields.extend(record.attrs)
    return f"{record.label} : {', '.join(fields)}"


def render_lines(table: PartitionTable, field_width: int = DEFAULT_FIELD_WIDTH) -> list[str]:
    """Passthrough lines in input order, then one line per partition."""
    lines = [line.text for line in table.passthrough]
    lines.extend(render_partition(record, field_width) for record in table.partitions)
    return lines


def render_dump(table: PartitionTable, field_width: int = DEFAULT_FIELD_WIDTH) -> str:
    """
    Render a whole dump.

    The output ends with a newline if the input did, or if it holds any
    partition entry. An empty table renders as an empty string.
    """
    lines = render_lines(table, field_width)
    if not lines:
        return ""

    text = "\n".join(lines)
    if table.trailing_newline or table.partitions:
        text += "\n"
    return text
