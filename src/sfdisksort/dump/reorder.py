"""
Partition reordering.

Sorts partition records by start sector and renumbers their device names
so that the Nth partition on disk is named with partition number N.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from sfdisksort.core.errors import DumpError, MixedDevicesError
from sfdisksort.core.logging import get_logger
from sfdisksort.core.models import DeviceName, PartitionRecord, PartitionTable
from sfdisksort.dump.devices import parse_device_name

logger = get_logger(__name__)

# Partition numbers above this are logical partitions on dos tables
DOS_PRIMARY_LIMIT = 4


def sort_partitions(records: Iterable[PartitionRecord]) -> list[PartitionRecord]:
    """Sort records by start sector; equal starts keep their input order."""
    return sorted(records, key=lambda record: record.start)


def device_names(records: Iterable[PartitionRecord]) -> list[DeviceName]:
    """Split every record label, failing on labels without a partition number."""
    names = []
    for record in records:
        name = parse_device_name(record.label)
        if name is None:
            raise DumpError(
                f"device {record.label} has no partition number",
                record.line_number,
                record.label,
            )
        names.append(name)
    return names


def relabel_partitions(records: list[PartitionRecord]) -> list[PartitionRecord]:
    """
    Renumber records by position: the Nth record gets partition number N.

    The disk path and the separator style ("p", "-part" or none) come from
    the record's own label. All records must name the same disk.
    """
    names = device_names(records)

    prefixes = sorted({name.prefix for name in names})
    if len(prefixes) > 1:
        raise MixedDevicesError(
            f"partition entries refer to more than one disk ({', '.join(prefixes)})"
        )

    relabeled = []
    for ordinal, (record, name) in enumerate(zip(records, names), start=1):
        label = name.with_number(ordinal).path
        if label != record.label:
            logger.debug(
                "Relabeled partition",
                old_label=record.label,
                new_label=label,
                start=record.start,
            )
        relabeled.append(replace(record, label=label, attrs=list(record.attrs)))

    return relabeled


def warn_dos_logical(table: PartitionTable) -> None:
    """Warn when a dos table has logical partitions, whose numbers are fixed at 5+."""
    if (table.label_type or "").lower() != "dos":
        return
    logical = [
        name.path for name in device_names(table.partitions) if name.number > DOS_PRIMARY_LIMIT
    ]
    if logical:
        logger.warning(
            "dos table has logical partitions; renumbering ignores the extended partition",
            logical=logical,
        )


def reorder(table: PartitionTable) -> PartitionTable:
    """Return a new table with partitions sorted by start and renumbered."""
    warn_dos_logical(table)
    partitions = relabel_partitions(sort_partitions(table.partitions))

    return PartitionTable(
        passthrough=list(table.passthrough),
        partitions=partitions,
        headers=dict(table.headers),
        trailing_newline=table.trailing_newline,
    )


def is_changed(table: PartitionTable) -> bool:
    """Whether reordering moved or renamed any partition of a reordered table."""
    if any(record.relabeled for record in table.partitions):
        return True
    line_numbers = [record.line_number for record in table.partitions]
    return line_numbers != sorted(line_numbers)
