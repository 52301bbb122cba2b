"""
sfdisksort error types.

Every error raised while reading a dump derives from DumpError and
records the input line it was raised for.
"""

from __future__ import annotations


class DumpError(Exception):
    """Base error for unusable dump input."""

    def __init__(self, message: str, line_number: int | None = None, line: str | None = None):
        self.message = message
        self.line_number = line_number
        self.line = line
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if not self.line_number:
            return self.message
        return f"line {self.line_number}: {self.message}: {self.line!r}"


class MalformedNumericFieldError(DumpError):
    """A start= or size= value is not an unsigned integer."""

    def __init__(self, field: str, value: str, line_number: int | None = None, line: str | None = None):
        self.field = field
        self.value = value
        super().__init__(f"{field}={value!r} is not an unsigned integer", line_number, line)


class UnrecognizedLineError(DumpError):
    """A line is neither a header, a comment, nor a valid partition entry."""


class MixedDevicesError(DumpError):
    """Partition entries refer to more than one disk."""
