"""Error kinds raised by the fluency core."""
from __future__ import annotations

from typing import Optional


class FluencyError(Exception):
    """Base class for every error the core reports to its caller."""


class InvalidDurationError(FluencyError, ValueError):
    """The elapsed reading time cannot be used to compute a rate."""

    def __init__(self, elapsed_seconds: object) -> None:
        self.elapsed_seconds = elapsed_seconds
        super().__init__(
            f"elapsed_seconds must be a finite number greater than 0, got {elapsed_seconds!r}"
        )


class OversizedInputError(FluencyError, ValueError):
    """A token sequence is longer than the configured maximum.

    Attributes:
        side: "reference" or "hypothesis"
        count: Number of tokens supplied on that side
        limit: Configured maximum token count
    """

    def __init__(self, side: str, count: int, limit: int, message: Optional[str] = None) -> None:
        self.side = side
        self.count = count
        self.limit = limit
        super().__init__(message or f"{side} has {count} tokens, limit is {limit}")
