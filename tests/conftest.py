# pragma: no cover  # do not test coverage of tests...
# type: ignore
"""Provide fixtures for pytest."""

import itertools

import pytest
from stix_sdk.core.clock import FixedClock

REPORT_ID = "report--1358da6f-719c-42b2-aff3-df8df37af59a"
INSTANT = "2016-01-20T12:31:12.123Z"


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Fixture to create a clock stuck at a known instant."""
    return FixedClock(INSTANT)


@pytest.fixture
def sequential_uuids():
    """Fixture to create a predictable uuid factory."""
    counter = itertools.count(1)
    return lambda: f"00000000-0000-4000-8000-{next(counter):012d}"


@pytest.fixture
def report_json() -> dict:
    """Fixture to create the JSON value of a valid report."""
    return {
        "type": "report",
        "spec_version": "2.1",
        "id": REPORT_ID,
        "created": "2016-01-20T12:31:12.123Z",
        "modified": "2016-01-20T12:31:12.123Z",
        "name": "analysis id 1",
        "published": "2016-01-20T12:31:12Z",
        "object_refs": [
            "indicator--26ffb872-1dd9-446e-b6f5-d58527e5b5d2",
            "campaign--83422c77-904c-4dc1-aff5-5c38f3a2c55c",
        ],
    }


@pytest.fixture
def identity_json() -> dict:
    """Fixture to create the JSON value of a valid identity."""
    return {
        "type": "identity",
        "spec_version": "2.1",
        "id": "identity--311b2d2d-f010-4473-83ec-1edf84858f4c",
        "created": "2015-12-21T19:59:11.000Z",
        "modified": "2015-12-21T19:59:11.000Z",
        "name": "ACME, Inc.",
        "identity_class": "organization",
    }


@pytest.fixture
def file_json() -> dict:
    """Fixture to create the JSON value of a file observable carrying extensions."""
    return {
        "type": "file",
        "spec_version": "2.1",
        "id": "file--5a27d487-c542-5f97-a131-a8866b477b46",
        "name": "picture.jpg",
        "hashes": {"SHA-256": "fe90a7e910cb3a4739bed9180e807e93fa70c90f25a8915476f5e4bfbac681db"},
        "extensions": {
            "raster-image-ext": {
                "exif_tags": {"Make": "Nikon", "Model": "D7000", "XResolution": 4928}
            },
            "x-acme-ext": {"rating": 5},
        },
    }


@pytest.fixture
def tlp_marking_json() -> dict:
    """Fixture to create the JSON value of the TLP:GREEN marking definition."""
    return {
        "type": "marking-definition",
        "spec_version": "2.1",
        "id": "marking-definition--34098fce-860f-48ae-8e50-ebd3cc5e41da",
        "created": "2017-01-20T00:00:00.000Z",
        "definition_type": "tlp",
        "name": "TLP:GREEN",
        "definition": {"tlp": "green"},
    }
