"""
sfdisksort - reorder an sfdisk dump by partition start sector.

Reads `sfdisk -d` output, sorts the partition entries by start sector,
renumbers the device names to match, and writes a dump that can be fed
back into sfdisk.
"""

__version__ = "1.0.0"
__author__ = "sfdisksort Team"

from sfdisksort.core.config import SorterConfig
from sfdisksort.dump.pipeline import sort_dump

__all__ = ["SorterConfig", "sort_dump", "__version__"]
