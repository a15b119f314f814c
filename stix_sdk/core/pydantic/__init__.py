"""Offer core classes & functions."""

from stix_sdk.core.pydantic.parsers import parse_either, split_identifier
from stix_sdk.core.pydantic.serializers import stix_object_serializer
from stix_sdk.core.pydantic.types import (
    Confidence,
    Either,
    Hashes,
    Identifier,
    IdentifierList,
    LongOrString,
    StringList,
    StringOrStringList,
    Timestamp,
)

__all__ = [
    "Confidence",
    "Either",
    "Hashes",
    "Identifier",
    "IdentifierList",
    "LongOrString",
    "StringList",
    "StringOrStringList",
    "Timestamp",
    "parse_either",
    "split_identifier",
    "stix_object_serializer",
]
