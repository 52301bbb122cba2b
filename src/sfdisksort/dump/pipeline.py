"""
The sort pipeline: parse, reorder, render.
"""

from __future__ import annotations

from sfdisksort.core.config import SorterConfig
from sfdisksort.core.logging import OperationLogger, get_logger
from sfdisksort.core.models import SortResult
from sfdisksort.dump.parser import parse_dump
from sfdisksort.dump.renderer import render_dump
from sfdisksort.dump.reorder import is_changed, reorder

logger = get_logger(__name__)


def sort_dump(text: str, config: SorterConfig | None = None) -> SortResult:
    """
    Sort the partition entries of an sfdisk dump by start sector.

    Raises DumpError (or a subclass) for input that must not be turned
    into a new partition table. Nothing is rendered in that case.
    """
    config = config or SorterConfig()

    with OperationLogger("sort", logger, strict=config.parsing.strict) as op:
        table = parse_dump(text, strict=config.parsing.strict)

        if table.is_empty:
            logger.info("No partition entries found; passing input through")

        sorted_table = reorder(table)
        changed = is_changed(sorted_table)
        op.update(partitions=len(sorted_table.partitions), changed=changed)

        return SortResult(
            table=sorted_table,
            text=render_dump(sorted_table, config.output.field_width),
            changed=changed,
        )
