"""IPV6Address."""

from typing import Literal

from pydantic import Field, StrictStr
from stix_sdk.core.pydantic import IdentifierList
from stix_sdk.models._model_registry import OBSERVABLES
from stix_sdk.models.base_observable import BaseObservable


@OBSERVABLES.register
class IPV6Address(BaseObservable):
    """Define an IP v6 address."""

    type: Literal["ipv6-addr"] = Field(description="The type of the object.")
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
