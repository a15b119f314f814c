"""Vulnerability."""

from typing import Literal

from pydantic import Field, StrictStr
from stix_sdk.models._model_registry import DOMAIN_OBJECTS
from stix_sdk.models.base_core_object import BaseDomainObject


@DOMAIN_OBJECTS.register
class Vulnerability(BaseDomainObject):
    """Represent a mistake in software that can be directly used to gain access to a system or network.

    Examples:
        >>> vulnerability = Vulnerability.new(name="CVE-2016-1234")
    """

    type: Literal["vulnerability"] = Field(description="The type of the object.")
    name: StrictStr = Field(description="Name of the vulnerability.")
    description: StrictStr | None = Field(
        default=None,
        description="Description of the vulnerability.",
    )
