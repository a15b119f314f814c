"""Unit tests for the domain objects."""

import pytest
from stix2.v21 import Campaign as Stix2Campaign
from stix2.v21 import Identity as Stix2Identity
from stix_sdk.codec import decode_sdo
from stix_sdk.exceptions import FieldTypeMismatchError, VocabularyWarning
from stix_sdk.models import (
    AttackPattern,
    Campaign,
    CourseOfAction,
    CustomStix,
    Identity,
    Indicator,
    IntrusionSet,
    KillChainPhase,
    Malware,
    ObservedData,
    ThreatActor,
    Tool,
    Vulnerability,
)
from stix_sdk.models.enums import IdentityClass

COMMON = {
    "spec_version": "2.1",
    "created": "2016-04-06T20:03:48.000Z",
    "modified": "2016-04-06T20:03:48.000Z",
}


@pytest.mark.parametrize(
    "model, fields",
    [
        pytest.param(
            AttackPattern,
            {
                "name": "Spear Phishing",
                "kill_chain_phases": [
                    {"kill_chain_name": "mitre-attack", "phase_name": "initial-access"}
                ],
            },
            id="attack_pattern",
        ),
        pytest.param(Campaign, {"name": "Green Group Attacks", "objective": "Steal"}, id="campaign"),
        pytest.param(CourseOfAction, {"name": "Add TCP port 80 Filter Rule"}, id="course_of_action"),
        pytest.param(Identity, {"name": "John Smith", "identity_class": "individual"}, id="identity"),
        pytest.param(
            Indicator,
            {
                "pattern": "[ipv4-addr:value = '198.51.100.1']",
                "pattern_type": "stix",
                "valid_from": "2016-01-01T00:00:00Z",
                "indicator_types": ["malicious-activity"],
            },
            id="indicator",
        ),
        pytest.param(
            IntrusionSet,
            {"name": "Bobcat Breakin", "primary_motivation": "organizational-gain"},
            id="intrusion_set",
        ),
        pytest.param(Malware, {"name": "Cryptolocker", "is_family": False}, id="malware"),
        pytest.param(
            ObservedData,
            {
                "first_observed": "2015-12-21T19:00:00Z",
                "last_observed": "2015-12-21T19:00:00Z",
                "number_observed": 50,
                "object_refs": ["ipv4-addr--efcd5e80-570d-4131-b213-62cb18eaa6a8"],
            },
            id="observed_data",
        ),
        pytest.param(
            ThreatActor,
            {"name": "Evil Org", "threat_actor_types": ["crime-syndicate"], "sophistication": "expert"},
            id="threat_actor",
        ),
        pytest.param(Tool, {"name": "VNC", "tool_types": ["remote-access"]}, id="tool"),
        pytest.param(Vulnerability, {"name": "CVE-2016-1234"}, id="vulnerability"),
    ],
)
def test_domain_objects_should_dispatch_and_round_trip(model, fields):
    """Test that each domain object kind is routed to its model and round-trips."""
    # Given the JSON value of a domain object
    kind = model.discriminator()
    data = {
        "type": kind,
        "id": f"{kind}--0c7b5b88-8ff7-4a4d-aa9d-feb398cd0061",
        **COMMON,
        **fields,
    }
    # When decoding it
    obj = decode_sdo(data)
    # Then the model of its kind is selected
    assert type(obj) is model
    # And it encodes back to the same JSON
    assert obj.encode() == data


def test_unknown_domain_object_should_decode_as_custom_stix():
    """Test that an unknown kind is kept whole by the catch-all."""
    # Given a domain object of an unknown kind
    data = {
        "type": "x-acme-widget",
        "id": "x-acme-widget--0c7b5b88-8ff7-4a4d-aa9d-feb398cd0061",
        **COMMON,
        "size": 3,
        "parts": ["a", "b"],
    }
    # When decoding it
    obj = decode_sdo(data)
    # Then it is a CustomStix carrying the unknown properties
    assert isinstance(obj, CustomStix)
    assert obj.type == "x-acme-widget"
    assert obj.custom_properties == {"size": 3, "parts": ["a", "b"]}
    assert obj.encode() == data


def test_discriminator_lookup_should_be_case_sensitive():
    """Test that `Vulnerability` is not `vulnerability`."""
    data = {
        "type": "Vulnerability",
        "id": "Vulnerability--0c7b5b88-8ff7-4a4d-aa9d-feb398cd0061",
        **COMMON,
        "name": "CVE-2016-1234",
    }
    assert isinstance(decode_sdo(data), CustomStix)


def test_custom_stix_new_should_require_explicit_type():
    """Test that CustomStix.new needs a type to scope its identifier."""
    with pytest.raises(TypeError):
        CustomStix.new()
    custom = CustomStix.new(type="x-acme-widget", custom_properties={"x_size": 3})
    assert custom.id.kind == "x-acme-widget"
    assert custom.encode()["x_size"] == 3


def test_identity_should_keep_unknown_vocabulary_value_with_warning():
    """Test that an open vocabulary accepts unknown values."""
    # When building an identity of an unknown class
    with pytest.warns(VocabularyWarning):
        identity = Identity.new(name="R2-D2", identity_class="droid")
    # Then the value is kept and encoded verbatim
    assert identity.identity_class == "droid"
    assert identity.encode()["identity_class"] == "droid"


def test_identity_should_reject_non_string_vocabulary_value(identity_json):
    """Test that open vocabularies still require strings."""
    identity_json["identity_class"] = 5
    with pytest.raises(FieldTypeMismatchError) as error:
        decode_sdo(identity_json)
    assert error.value.field == "identity_class"


def test_identity_should_decode_vocabulary_members(identity_json):
    """Test that known vocabulary values decode to enum members."""
    identity = decode_sdo(identity_json)
    assert identity.identity_class is IdentityClass.ORGANIZATION


def test_identity_to_stix2_object_returns_valid_stix_object(identity_json):
    """Test that to_stix2_object returns a valid STIX2.1 Identity."""
    assert isinstance(decode_sdo(identity_json).to_stix2_object(), Stix2Identity)


def test_campaign_to_stix2_object_returns_valid_stix_object():
    """Test that a new campaign is accepted by the stix2 library."""
    campaign = Campaign.new(name="Green Group Attacks", first_seen="2016-01-08T12:50:40.123Z")
    stix2_obj = campaign.to_stix2_object()
    assert isinstance(stix2_obj, Stix2Campaign)
    assert stix2_obj.id == campaign.id.encode()


def test_indicator_should_allow_missing_optional_properties():
    """Test that labels and valid_until are optional."""
    indicator = Indicator.new(
        pattern="[file:name = 'evil.exe']",
        valid_from="2016-01-01T00:00:00Z",
    )
    assert indicator.labels is None
    assert indicator.valid_until is None
    assert {"labels", "valid_until"}.isdisjoint(indicator.encode())


def test_malware_should_keep_kill_chain_phases():
    """Test that nested supporting types are decoded to their models."""
    malware = Malware.new(
        name="Poison Ivy",
        kill_chain_phases=[{"kill_chain_name": "lockheed-martin-cyber-kill-chain", "phase_name": "delivery"}],
    )
    assert malware.kill_chain_phases == [
        KillChainPhase(kill_chain_name="lockheed-martin-cyber-kill-chain", phase_name="delivery")
    ]
    assert str(malware.kill_chain_phases[0]) == "lockheed-martin-cyber-kill-chain,delivery"


def test_observed_data_should_keep_deprecated_objects_as_json():
    """Test that the objects map of observed-data is not decoded."""
    observed = ObservedData.new(
        first_observed="2015-12-21T19:00:00Z",
        last_observed="2015-12-21T19:00:00Z",
        number_observed=1,
        objects={"0": {"type": "file", "name": "foo.exe"}},
    )
    assert observed.objects == {"0": {"type": "file", "name": "foo.exe"}}
