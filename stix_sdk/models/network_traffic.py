"""NetworkTraffic."""

from typing import Literal

from pydantic import Field, StrictBool, StrictInt, StrictStr
from stix_sdk.core.pydantic import Identifier, IdentifierList, LongOrString, Timestamp
from stix_sdk.models._model_registry import OBSERVABLES
from stix_sdk.models.base_observable import BaseObservable


@OBSERVABLES.register
class NetworkTraffic(BaseObservable):
    """Represent arbitrary network traffic from a source to a destination.

    Examples:
        >>> traffic = NetworkTraffic.new(
        ...     protocols=["ipv4", "tcp"],
        ...     ipfix={"minimumIpTotalLength": 32, "protocolIdentifier": "tcp"},
        ... )
        >>> traffic.ipfix["minimumIpTotalLength"]
        32
    """

    type: Literal["network-traffic"] = Field(description="The type of the object.")
    protocols: list[StrictStr] = Field(
        description="Protocols observed, from outermost to innermost.",
    )
    start: Timestamp | None = Field(
        default=None,
        description="Date/time the traffic was initiated.",
    )
    end: Timestamp | None = Field(
        default=None,
        description="Date/time the traffic ended.",
    )
    is_active: StrictBool | None = Field(
        default=None,
        description="Whether the traffic is still ongoing.",
    )
    src_ref: Identifier | None = Field(
        default=None,
        description="The source of the traffic.",
    )
    dst_ref: Identifier | None = Field(
        default=None,
        description="The destination of the traffic.",
    )
    src_port: StrictInt | None = Field(
        default=None,
        description="Source port.",
        ge=0,
        le=65535,
    )
    dst_port: StrictInt | None = Field(
        default=None,
        description="Destination port.",
        ge=0,
        le=65535,
    )
    src_byte_count: StrictInt | None = Field(
        default=None,
        description="Number of bytes sent from the source to the destination.",
    )
    dst_byte_count: StrictInt | None = Field(
        default=None,
        description="Number of bytes sent from the destination to the source.",
    )
    src_packets: StrictInt | None = Field(
        default=None,
        description="Number of packets sent from the source to the destination.",
    )
    dst_packets: StrictInt | None = Field(
        default=None,
        description="Number of packets sent from the destination to the source.",
    )
    ipfix: dict[StrictStr, LongOrString] | None = Field(
        default=None,
        description="IP Flow Information Export data, integer or string valued.",
    )
    src_payload_ref: Identifier | None = Field(
        default=None,
        description="The artifact holding the bytes sent from the source.",
    )
    dst_payload_ref: Identifier | None = Field(
        default=None,
        description="The artifact holding the bytes sent from the destination.",
    )
    encapsulates_refs: IdentifierList | None = Field(
        default=None,
        description="Network traffic encapsulated by this one.",
    )
    encapsulated_by_ref: Identifier | None = Field(
        default=None,
        description="Network traffic encapsulating this one.",
    )
