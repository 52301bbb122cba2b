"""
sfdisksort data models.

Defines the structures that flow through the classify, parse, sort and
render stages.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Any

DEFAULT_SECTOR_SIZE = 512


class LineKind(Enum):
    """Syntactic class of one dump line."""

    HEADER = auto()
    COMMENT = auto()
    BLANK = auto()
    PARTITION = auto()
    UNRECOGNIZED = auto()


class BlockDeviceKind(Enum):
    """Linux block device family, derived from the device name."""

    SCSI = auto()  # sdX: SCSI, SATA, USB mass storage
    VIRTIO = auto()  # vdX
    XEN = auto()  # xvdX
    MMC = auto()  # mmcblkN: eMMC, SD cards
    NVME = auto()  # nvmeNnM
    LOOP = auto()
    OTHER = auto()


@dataclass(frozen=True)
class DeviceName:
    """A partition device path split around its partition number."""

    base: str  # e.g., /dev/nvme0n1
    separator: str  # "", "p" or "-part"
    number: int

    @property
    def prefix(self) -> str:
        return f"{self.base}{self.separator}"

    @property
    def path(self) -> str:
        return f"{self.prefix}{self.number}"

    def with_number(self, number: int) -> DeviceName:
        return replace(self, number=number)


@dataclass
class PassthroughLine:
    """A line emitted unchanged: header, comment, blank or unparsed entry."""

    text: str
    line_number: int
    kind: LineKind


@dataclass
class PartitionRecord:
    """One partition entry of an sfdisk dump."""

    label: str  # e.g., /dev/sdb2
    start: int
    size: int | None = None
    type: str | None = None
    attrs: list[str] = field(default_factory=list)
    line_number: int = 0
    original_label: str | None = None

    def __post_init__(self) -> None:
        if self.original_label is None:
            self.original_label = self.label

    @property
    def end(self) -> int | None:
        if self.size is None:
            return None
        return self.start + self.size - 1

    @property
    def relabeled(self) -> bool:
        return self.label != self.original_label

    def content_key(self) -> tuple[int, int | None, str | None, tuple[str, ...]]:
        """Everything except the label; unchanged by sorting."""
        return (self.start, self.size, self.type, tuple(self.attrs))

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "original_label": self.original_label,
            "start": self.start,
            "size": self.size,
            "type": self.type,
            "attrs": list(self.attrs),
            "line_number": self.line_number,
        }


@dataclass
class PartitionTable:
    """A parsed dump: passthrough lines, partition records and headers."""

    passthrough: list[PassthroughLine] = field(default_factory=list)
    partitions: list[PartitionRecord] = field(default_factory=list)
    headers: dict[str, str] = field(default_factory=dict)
    trailing_newline: bool = True

    @property
    def label_type(self) -> str | None:
        return self.headers.get("label")

    @property
    def device(self) -> str | None:
        return self.headers.get("device")

    @property
    def sector_size(self) -> int:
        try:
            return int(self.headers.get("sector-size", DEFAULT_SECTOR_SIZE))
        except ValueError:
            return DEFAULT_SECTOR_SIZE

    @property
    def is_empty(self) -> bool:
        return not self.partitions

    def to_dict(self) -> dict[str, Any]:
        return {
            "headers": dict(self.headers),
            "partitions": [p.to_dict() for p in self.partitions],
            "passthrough": [line.text for line in self.passthrough],
        }


@dataclass
class SortResult:
    """Outcome of one sort run."""

    table: PartitionTable
    text: str
    changed: bool
