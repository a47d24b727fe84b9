from __future__ import annotations


class PowerLogError(Exception):
    """Base class for every failure raised while converting a power log."""


class MalformedStreamError(PowerLogError):
    """The input ended mid-record or could not be read."""

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(message)
        self.offset = offset


class SinkFailureError(PowerLogError):
    """The output refused a write or flush."""


class UnresolvedAnchorError(PowerLogError):
    """No start time could be derived from the file name and timezone."""
