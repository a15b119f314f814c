"""Offer the time and randomness sources used when building new STIX objects.

Decoding never calls them: only `new()` builders fill `id`, `created` and
`modified` from these capabilities.
"""

from typing import Callable, Protocol
from uuid import uuid4

from stix_sdk.core.pydantic.types import Timestamp

UuidFactory = Callable[[], str]


class Clock(Protocol):
    """Anything able to tell the current instant."""

    def now(self) -> Timestamp:
        """Return the current instant."""
        ...


class SystemClock:
    """Clock reading the system time."""

    def now(self) -> Timestamp:
        """Return the current UTC instant."""
        return Timestamp.now()


class FixedClock:
    """Clock stuck at a given instant, for reproducible documents.

    Examples:
        >>> FixedClock("2016-01-20T12:31:12.000Z").now()
        '2016-01-20T12:31:12.000Z'

    """

    def __init__(self, instant: str) -> None:
        """Initialize the clock."""
        self.instant = Timestamp(instant)

    def now(self) -> Timestamp:
        """Return the fixed instant."""
        return self.instant


def random_uuid() -> str:
    """Return a random (version 4) UUID string."""
    return str(uuid4())


SYSTEM_CLOCK = SystemClock()
