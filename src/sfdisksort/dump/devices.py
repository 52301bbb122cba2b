"""
Linux partition device naming.

Splits partition device paths into the disk path, the separator the kernel
puts before the partition number, and the number itself:

    /dev/sda3                 -> ("/dev/sda", "", 3)
    /dev/nvme0n1p3            -> ("/dev/nvme0n1", "p", 3)
    /dev/disk/by-id/ata-X-part3 -> ("/dev/disk/by-id/ata-X", "-part", 3)
"""

from __future__ import annotations

import re

from sfdisksort.core.models import BlockDeviceKind, DeviceName

TRAILING_NUMBER_RE = re.compile(r"^(?P<prefix>.*?)(?P<number>\d+)$")

BLOCK_DEVICE_PATTERNS: list[tuple[BlockDeviceKind, re.Pattern[str]]] = [
    (BlockDeviceKind.SCSI, re.compile(r"^/dev/sd[a-z]+$")),
    (BlockDeviceKind.VIRTIO, re.compile(r"^/dev/vd[a-z]+$")),
    (BlockDeviceKind.XEN, re.compile(r"^/dev/xvd[a-z]+$")),
    (BlockDeviceKind.MMC, re.compile(r"^/dev/mmcblk\d+$")),
    (BlockDeviceKind.NVME, re.compile(r"^/dev/nvme\d+n\d+$")),
    (BlockDeviceKind.LOOP, re.compile(r"^/dev/loop\d+$")),
]


def parse_device_name(path: str) -> DeviceName | None:
    """
    Split a partition device path around its trailing partition number.

    Returns None when the path does not end in a partition number.
    """
    match = TRAILING_NUMBER_RE.match(path.strip())
    if not match:
        return None

    prefix = match.group("prefix")
    number = int(match.group("number"))
    if not prefix or prefix.endswith("/"):
        return None

    if prefix.endswith("-part"):
        return DeviceName(base=prefix[: -len("-part")], separator="-part", number=number)

    # Kernel inserts "p" when the disk name itself ends in a digit
    if prefix.endswith("p") and len(prefix) > 1 and prefix[-2].isdigit():
        return DeviceName(base=prefix[:-1], separator="p", number=number)

    return DeviceName(base=prefix, separator="", number=number)


def block_device_kind(disk_path: str) -> BlockDeviceKind:
    """Determine the block device family of a whole-disk path."""
    for kind, pattern in BLOCK_DEVICE_PATTERNS:
        if pattern.match(disk_path):
            return kind
    return BlockDeviceKind.OTHER
