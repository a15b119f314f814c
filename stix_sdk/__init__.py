"""Offer a package to decode and encode STIX 2.1 JSON documents."""

__version__ = "0.1.0"

from stix_sdk.codec import (
    DEFAULT_CODEC,
    StixCodec,
    decode_bundle,
    decode_bundle_objects,
    decode_extension,
    decode_marking_definition,
    decode_observable,
    decode_sdo,
    decode_sro,
    dumps,
    encode,
    loads,
    parse,
)
from stix_sdk.core.clock import FixedClock, SystemClock
from stix_sdk.core.pydantic import Identifier, Timestamp
from stix_sdk.settings import StixSdkSettings, configure_logging

__all__ = [
    # Codec
    "DEFAULT_CODEC",
    "StixCodec",
    "decode_bundle",
    "decode_bundle_objects",
    "decode_extension",
    "decode_marking_definition",
    "decode_observable",
    "decode_sdo",
    "decode_sro",
    "dumps",
    "encode",
    "loads",
    "parse",
    # Scalars
    "Identifier",
    "Timestamp",
    # Clocks
    "FixedClock",
    "SystemClock",
    # Settings
    "StixSdkSettings",
    "configure_logging",
]
