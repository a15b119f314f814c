"""Unit tests for the shared behaviour of the STIX models."""

from pydantic import StrictStr
from stix_sdk.models import ExternalReference, KillChainPhase
from stix_sdk.models.base_object import BaseObject


class _Sample(BaseObject):
    name: StrictStr
    description: StrictStr | None = None


def test_objects_with_same_content_should_be_equal_and_hash_alike():
    """Test that equality and hash follow the encoded content."""
    first = ExternalReference(source_name="capec", external_id="CAPEC-163", x_acme=[1])
    second = ExternalReference(source_name="capec", external_id="CAPEC-163", x_acme=[1])
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_objects_of_different_types_should_not_be_equal():
    """Test that equality requires the same model."""
    assert _Sample(name="a") != KillChainPhase(kill_chain_name="a", phase_name="b")


def test_replace_should_keep_custom_properties():
    """Test that replace carries the custom properties to the copy."""
    # Given an object with a custom property
    sample = _Sample(name="a", x_acme=1)
    # When replacing a declared field
    replaced = sample.replace(description="d")
    # Then the custom property is kept
    assert replaced.custom_properties == {"x_acme": 1}
    assert replaced.encode() == {"name": "a", "description": "d", "x_acme": 1}


def test_replace_should_add_custom_property():
    """Test that replace accepts new custom properties."""
    assert _Sample(name="a").replace(x_new="v").custom_properties == {"x_new": "v"}
