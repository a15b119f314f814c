"""Unit tests for the Report model, the reference domain object."""

import logging

import pytest
from pydantic import ValidationError
from stix2.v21 import Report as Stix2Report
from stix_sdk.codec import decode_sdo
from stix_sdk.core.pydantic import Identifier
from stix_sdk.exceptions import (
    FieldTypeMismatchError,
    MalformedIdentifierError,
    MissingRequiredFieldError,
)
from stix_sdk.models.report import Report


def test_report_should_decode_reference_example(report_json):
    """Test that the reference report decodes into a Report."""
    # When decoding the report JSON
    report = decode_sdo(report_json)
    # Then a Report is returned with its identifier split into kind and uuid
    assert isinstance(report, Report)
    assert report.id == Identifier("report", "1358da6f-719c-42b2-aff3-df8df37af59a")
    assert report.name == "analysis id 1"
    assert report.published == "2016-01-20T12:31:12Z"


def test_report_should_round_trip(report_json):
    """Test that encoding a decoded report gives back the same JSON."""
    assert decode_sdo(report_json).encode() == report_json


def test_report_should_omit_absent_optional_fields(report_json):
    """Test that optional fields never appear as null."""
    # Given a decoded report without description
    report = decode_sdo(report_json)
    # Then the encoded form has no description key at all
    assert "description" not in report.encode()
    assert None not in report.encode().values()


def test_report_should_keep_custom_properties(report_json):
    """Test that unknown properties are carried through verbatim."""
    # Given a report JSON with custom properties, a null one included
    report_json |= {"x_acme_score": 42, "x_acme_tags": {"a": [1, 2]}, "x_acme_null": None}
    # When decoding then encoding it
    report = decode_sdo(report_json)
    # Then the custom properties are kept
    assert report.custom_properties == {
        "x_acme_score": 42,
        "x_acme_tags": {"a": [1, 2]},
        "x_acme_null": None,
    }
    assert report.encode() == report_json


def test_report_new_should_generate_common_properties(fixed_clock, sequential_uuids):
    """Test that Report.new fills type, id, spec_version, created and modified."""
    # When building a new report with a fixed clock and uuid source
    report = Report.new(
        name="analysis id 2",
        published="2016-01-20T12:31:12Z",
        object_refs=["indicator--26ffb872-1dd9-446e-b6f5-d58527e5b5d2"],
        clock=fixed_clock,
        uuid_factory=sequential_uuids,
    )
    # Then the generated properties are set
    assert report.type == "report"
    assert report.id == Identifier("report", "00000000-0000-4000-8000-000000000001")
    assert report.spec_version == "2.1"
    # And created and modified share one instant
    assert report.created == report.modified == "2016-01-20T12:31:12.123Z"


def test_report_new_should_keep_explicit_created_for_modified(fixed_clock):
    """Test that modified defaults to an explicit created."""
    report = Report.new(
        name="r",
        published="2016-01-20T12:31:12Z",
        object_refs=[],
        created="2015-01-01T00:00:00.000Z",
        clock=fixed_clock,
    )
    assert report.modified == "2015-01-01T00:00:00.000Z"


def test_report_new_should_drop_colliding_custom_properties(fixed_clock, caplog):
    """Test that a custom property never shadows a declared field."""
    # When building a report with a custom property named like a field
    with caplog.at_level(logging.WARNING):
        report = Report.new(
            name="analysis id 1",
            published="2016-01-20T12:31:12Z",
            object_refs=[],
            custom_properties={"name": "shadow", "x_acme": True},
            clock=fixed_clock,
        )
    # Then the declared field wins and a warning is logged
    assert report.name == "analysis id 1"
    assert report.custom_properties == {"x_acme": True}
    assert "collides" in caplog.text


def test_report_replace_should_return_validated_copy(report_json):
    """Test that replace returns a new report and leaves the original untouched."""
    # Given a decoded report
    report = decode_sdo(report_json)
    # When replacing its name
    renamed = report.replace(name="renamed")
    # Then a new report is returned
    assert renamed.name == "renamed"
    assert report.name == "analysis id 1"
    assert renamed.id == report.id


def test_report_should_be_immutable(report_json):
    """Test that fields can not be assigned."""
    report = decode_sdo(report_json)
    with pytest.raises(ValidationError):
        report.name = "renamed"


def test_report_should_reject_missing_required_field(report_json):
    """Test that a missing name is reported as MissingRequiredFieldError."""
    # Given a report JSON without name
    del report_json["name"]
    # When decoding it
    # Then the missing field is reported
    with pytest.raises(MissingRequiredFieldError) as error:
        decode_sdo(report_json)
    assert error.value.field == "name"


def test_report_decode_should_never_fabricate_id(report_json):
    """Test that decoding does not generate a missing id."""
    del report_json["id"]
    with pytest.raises(MissingRequiredFieldError) as error:
        decode_sdo(report_json)
    assert error.value.loc == ("id",)


def test_report_should_reject_malformed_identifier(report_json):
    """Test that a malformed id is reported as MalformedIdentifierError."""
    report_json["id"] = "bad-id-no-separator"
    with pytest.raises(MalformedIdentifierError) as error:
        decode_sdo(report_json)
    assert error.value.field == "id"
    assert error.value.value == "bad-id-no-separator"


def test_report_should_reject_malformed_reference(report_json):
    """Test that a malformed reference in a list is located by index."""
    report_json["object_refs"] = ["indicator--26ffb872-1dd9-446e-b6f5-d58527e5b5d2", "nope"]
    with pytest.raises(MalformedIdentifierError) as error:
        decode_sdo(report_json)
    assert error.value.loc == ("object_refs", 1)


@pytest.mark.parametrize(
    "field, value",
    [
        pytest.param("name", 42, id="number_for_string"),
        pytest.param("confidence", "42", id="string_for_integer"),
        pytest.param("revoked", 1, id="integer_for_boolean"),
        pytest.param("labels", "label", id="string_for_list"),
        pytest.param("created", 1453293072, id="number_for_timestamp"),
    ],
)
def test_report_should_reject_field_type_mismatch(report_json, field, value):
    """Test that strict scalar fields reject values of another JSON shape."""
    report_json[field] = value
    with pytest.raises(FieldTypeMismatchError) as error:
        decode_sdo(report_json)
    assert error.value.loc[0] == field


def test_report_should_reject_out_of_range_confidence(report_json):
    """Test that confidence is bounded to 0-100."""
    report_json["confidence"] = 101
    with pytest.raises(FieldTypeMismatchError):
        decode_sdo(report_json)


def test_report_should_locate_nested_errors(report_json):
    """Test that errors in nested values carry the full path."""
    report_json["external_references"] = [{"url": "https://example.com"}]
    with pytest.raises(MissingRequiredFieldError) as error:
        decode_sdo(report_json)
    assert error.value.field == "external_references.0.source_name"


def test_report_to_stix2_object_returns_valid_stix_object(report_json):
    """Test that to_stix2_object returns a valid STIX2.1 Report."""
    # Given a decoded report
    report = decode_sdo(report_json)
    # When calling to_stix2_object method
    stix2_obj = report.to_stix2_object()
    # Then a valid STIX2.1 Report is returned
    assert isinstance(stix2_obj, Stix2Report)
    assert stix2_obj.id == report_json["id"]
