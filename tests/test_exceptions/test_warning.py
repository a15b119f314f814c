"""Unit tests for warning tools."""

import warnings

import pytest
from stix_sdk.exceptions import VocabularyWarning
from stix_sdk.models.enums import ReportType


def test_vocabulary_warning_should_have_correct_string_representation():
    """Test that VocabularyWarning names the vocabulary and the value."""
    # Given a VocabularyWarning instance
    warning = VocabularyWarning("ReportType", "x-acme-report")
    # Then its string representation names both
    assert all(
        part in str(warning)
        for part in ("ReportType", "x-acme-report", "['type':'open_vocabulary_warn']")
    )


def test_permissive_enum_should_warn_and_keep_unknown_value():
    """Test that an open vocabulary keeps unknown values with a warning."""
    # When building a value outside of the vocabulary
    with pytest.warns(VocabularyWarning):
        value = ReportType("x-acme-report")
    # Then the value is kept
    assert value == "x-acme-report"
    assert value.value == "x-acme-report"


def test_permissive_enum_should_not_warn_for_known_value():
    """Test that known values are silent."""
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert ReportType("threat-report") is ReportType.THREAT_REPORT


def test_permissive_enum_should_reject_non_strings():
    """Test that non string values are not accepted."""
    with pytest.raises(ValueError):
        ReportType(42)
