"""Exception types raised by the extraction engine.

Only `AdapterNotFoundError` ever reaches callers of `ExtractionEngine.extract`.
The others are raised inside an adapter and absorbed at the engine boundary:
an invalid locator costs one locator, a failing document costs one record.
Validation failures are not exceptions at all; they are listed on the record.
"""

from __future__ import annotations

from typing import Optional


class JobExtractionError(Exception):
    """Base class for all extraction errors."""


class AdapterNotFoundError(JobExtractionError, KeyError):
    """No adapter is registered for the requested source id."""

    def __init__(self, source_id: str, available: Optional[list] = None) -> None:
        self.source_id = source_id
        self.available = sorted(available or [])
        msg = f"No adapter registered for source '{source_id}'"
        if self.available:
            msg += f". Available: {', '.join(self.available)}"
        super().__init__(msg)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class InvalidLocatorError(JobExtractionError):
    """A locator expression could not be parsed by the document."""

    def __init__(self, locator: str, reason: Optional[str] = None) -> None:
        self.locator = locator
        super().__init__(f"Invalid locator {locator!r}" + (f": {reason}" if reason else ""))


class ExtractionError(JobExtractionError):
    """Reading a field from the document failed."""

    def __init__(self, field: str, locator: Optional[str] = None, reason: Optional[str] = None) -> None:
        self.field = field
        self.locator = locator
        detail = f"Failed to extract '{field}'"
        if locator:
            detail += f" with locator {locator!r}"
        if reason:
            detail += f": {reason}"
        super().__init__(detail)
