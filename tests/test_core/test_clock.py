"""Unit tests for the clocks."""

from stix_sdk.core.clock import SYSTEM_CLOCK, FixedClock, random_uuid
from stix_sdk.core.pydantic import Timestamp


def test_fixed_clock_should_always_return_its_instant():
    """Test that FixedClock is stuck at its instant."""
    # Given a fixed clock
    clock = FixedClock("2016-01-20T12:31:12.000Z")
    # Then it always returns the same Timestamp
    assert clock.now() == clock.now() == "2016-01-20T12:31:12.000Z"
    assert isinstance(clock.now(), Timestamp)


def test_system_clock_should_return_canonical_timestamps():
    """Test that the system clock returns Timestamps."""
    assert isinstance(SYSTEM_CLOCK.now(), Timestamp)
    assert SYSTEM_CLOCK.now().endswith("Z")


def test_random_uuid_should_be_version_4():
    """Test that random_uuid returns version 4 UUID strings."""
    assert random_uuid()[14] == "4"
    assert random_uuid() != random_uuid()
