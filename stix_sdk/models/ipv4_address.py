"""IPV4Address."""

from typing import Literal

from pydantic import Field, StrictStr
from stix_sdk.core.pydantic import IdentifierList
from stix_sdk.models._model_registry import OBSERVABLES
from stix_sdk.models.base_observable import BaseObservable


@OBSERVABLES.register
class IPV4Address(BaseObservable):
    """Define an IP v4 address.

    The value is neither checked nor normalized: CIDR blocks are kept as given.

    Examples:
        >>> ip = IPV4Address.new(value="198.51.100.3")
        >>> entity = ip.to_stix2_object()

    """

    type: Literal["ipv4-addr"] = Field(description="The type of the object.")
    value: StrictStr = Field(
        description="The IP address value. CIDR is allowed.",
    )
    resolves_to_refs: IdentifierList | None = Field(
        default=None,
        description="MAC addresses the address resolves to (deprecated).",
    )
    belongs_to_refs: IdentifierList | None = Field(
        default=None,
        description="Autonomous systems the address belongs to (deprecated).",
    )
