"""Exception types raised inside the engine.

Only ``AmountParseError`` can reach callers, and only from the explicit
``FixedAmount.parse`` boundary call. ``MalformedRecordError`` is raised by the
record parsers and always caught by the page-level builders.
"""

from tokenlaunch.domain.enums.malformed import MalformedReason


class TokenLaunchError(Exception):
    """Base class for tokenlaunch errors."""


class AmountParseError(TokenLaunchError, ValueError):
    """A raw amount is not a decimal-string-encoded integer."""

    def __init__(self, raw: object) -> None:
        super().__init__(f"Cannot parse scaled amount from {raw!r}")
        self.raw = raw


class MalformedRecordError(TokenLaunchError):
    """An indexer record cannot be turned into a domain event."""

    def __init__(self, reason: MalformedReason, message: str, record_id: str | None = None) -> None:
        super().__init__(message)
        self.reason = reason
        self.record_id = record_id
