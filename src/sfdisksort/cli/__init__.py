"""
sfdisksort CLI Module.

Provides the command-line interface for sfdisksort.
"""

from sfdisksort.cli.main import main, cli

__all__ = ["main", "cli"]
