"""
sfdisksort Core - configuration, logging, errors and data models.
"""

from sfdisksort.core.config import SorterConfig, load_config
from sfdisksort.core.errors import (
    DumpError,
    MalformedNumericFieldError,
    MixedDevicesError,
    UnrecognizedLineError,
)
from sfdisksort.core.logging import get_logger, setup_logging

__all__ = [
    "SorterConfig",
    "load_config",
    "DumpError",
    "MalformedNumericFieldError",
    "MixedDevicesError",
    "UnrecognizedLineError",
    "get_logger",
    "setup_logging",
]
