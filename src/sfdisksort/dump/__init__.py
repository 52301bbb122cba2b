"""
sfdisksort dump handling.

Classifies, parses, reorders and renders `sfdisk -d` output.
"""

from sfdisksort.dump.classifier import classify_line
from sfdisksort.dump.devices import block_device_kind, parse_device_name
from sfdisksort.dump.parser import parse_dump, parse_header_line, parse_partition_line
from sfdisksort.dump.pipeline import sort_dump
from sfdisksort.dump.renderer import render_dump, render_partition
from sfdisksort.dump.reorder import relabel_partitions, reorder, sort_partitions

__all__ = [
    "classify_line",
    "block_device_kind",
    "parse_device_name",
    "parse_dump",
    "parse_header_line",
    "parse_partition_line",
    "sort_dump",
    "render_dump",
    "render_partition",
    "relabel_partitions",
    "reorder",
    "sort_partitions",
]
