"""Unit tests for the STIX wire parsers."""

import pytest
from pydantic import StrictInt, StrictStr, TypeAdapter
from pydantic_core import PydanticCustomError
from stix_sdk.core.pydantic import parse_either, split_identifier
from stix_sdk.exceptions import MalformedIdentifierError


def test_split_identifier_should_return_kind_and_uuid():
    """Test that split_identifier splits on the `--` separator."""
    assert split_identifier("report--1358da6f-719c-42b2-aff3-df8df37af59a") == (
        "report",
        "1358da6f-719c-42b2-aff3-df8df37af59a",
    )


def test_split_identifier_should_reject_value_without_separator():
    """Test that split_identifier rejects a value without separator."""
    with pytest.raises(MalformedIdentifierError):
        split_identifier("bad-id-no-separator")


def test_parse_either_should_prefer_first_alternative():
    """Test that parse_either returns the first alternative when it matches."""
    # Given int and str adapters
    first, second = TypeAdapter(StrictInt), TypeAdapter(StrictStr)
    # Then each JSON shape selects its alternative
    assert parse_either(7, first, second) == 7
    assert parse_either("7", first, second) == "7"


def test_parse_either_should_report_second_alternative_error():
    """Test that parse_either raises with the message of the second alternative."""
    # Given int and str adapters
    first, second = TypeAdapter(StrictInt), TypeAdapter(StrictStr)
    # When no alternative matches
    # Then the custom error carries the message of the second alternative
    with pytest.raises(PydanticCustomError) as error:
        parse_either(1.5, first, second)
    assert error.value.type == "malformed_flexible_value"
    assert "Input should be a valid string" in str(error.value)
