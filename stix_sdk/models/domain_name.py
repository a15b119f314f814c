"""DomainName."""

from typing import Literal

from pydantic import Field, StrictStr
from stix_sdk.core.pydantic import IdentifierList
from stix_sdk.models._model_registry import OBSERVABLES
from stix_sdk.models.base_observable import BaseObservable


@OBSERVABLES.register
class DomainName(BaseObservable):
    """Represent a network domain name.

    Examples:
        >>> domain = DomainName.new(value="example.com")
        >>> domain.encode()["type"]
        'domain-name'
    """

    type: Literal["domain-name"] = Field(description="The type of the object.")
    value: StrictStr = Field(description="The domain name.")
    resolves_to_refs: IdentifierList | None = Field(
        default=None,
        description="Addresses or domain names the domain name resolves to.",
    )
