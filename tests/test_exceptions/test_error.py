"""Unit tests for the exception hierarchy."""

import pytest
from stix_sdk.exceptions import (
    ConfigError,
    FieldTypeMismatchError,
    MalformedFlexibleValueError,
    MalformedIdentifierError,
    MissingRequiredFieldError,
    StixDecodeError,
    StixError,
    UnknownDiscriminatorError,
)


@pytest.mark.parametrize(
    "error",
    [
        pytest.param(MissingRequiredFieldError(("name",)), id="missing"),
        pytest.param(FieldTypeMismatchError(("name",), "Input should be a valid string"), id="mismatch"),
        pytest.param(UnknownDiscriminatorError("relationship object", "foo"), id="discriminator"),
        pytest.param(MalformedIdentifierError("bad-id-no-separator"), id="identifier"),
        pytest.param(MalformedFlexibleValueError("No alternative accepts the value"), id="flexible"),
    ],
)
def test_decode_errors_should_share_base_class(error):
    """Test that every decode error is a StixDecodeError and not a ValueError."""
    assert isinstance(error, StixDecodeError)
    assert isinstance(error, StixError)
    assert not isinstance(error, ValueError)


def test_config_error_should_not_be_a_decode_error():
    """Test that ConfigError sits beside the decode errors."""
    assert issubclass(ConfigError, StixError)
    assert not issubclass(ConfigError, StixDecodeError)


def test_decode_error_should_render_dotted_field():
    """Test that the string form of a decode error names the field path."""
    # Given an error located in a nested field
    error = MissingRequiredFieldError(("external_references", 0, "source_name"))
    # Then the field is rendered in dotted notation
    assert error.field == "external_references.0.source_name"
    assert str(error) == "external_references.0.source_name: Required field is missing."


def test_with_prefix_should_prepend_location():
    """Test that with_prefix relocates the error under a parent path."""
    # Given an error located at the root of an extension
    error = UnknownDiscriminatorError("extension", "foo-ext", ("extensions", "foo-ext"))
    # When prefixing it
    prefixed = error.with_prefix("objects", 2)
    # Then the same error is returned, relocated
    assert prefixed is error
    assert error.loc == ("objects", 2, "extensions", "foo-ext")


def test_unknown_discriminator_error_should_carry_raw_value():
    """Test that UnknownDiscriminatorError keeps the family and the raw value."""
    error = UnknownDiscriminatorError("marking", "Tlp")
    assert error.family == "marking"
    assert error.value == "Tlp"
    assert str(error) == "Unknown marking discriminator 'Tlp'."
