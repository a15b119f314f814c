"""Identity."""

from typing import Literal

from pydantic import Field, StrictStr
from stix_sdk.core.pydantic import StringList
from stix_sdk.models._model_registry import DOMAIN_OBJECTS
from stix_sdk.models.base_core_object import BaseDomainObject
from stix_sdk.models.enums import IdentityClass


@DOMAIN_OBJECTS.register
class Identity(BaseDomainObject):
    """Represent an individual, organization or group, or a class of them.

    Examples:
        >>> identity = Identity.new(name="ACME, Inc.", identity_class="organization")
    """

    type: Literal["identity"] = Field(description="The type of the object.")
    name: StrictStr = Field(description="Name of the identity.")
    identity_class: IdentityClass = Field(
        description="The type of entity the identity describes.",
    )
    description: StrictStr | None = Field(
        default=None,
        description="Description of the identity.",
    )
    roles: StringList | None = Field(
        default=None,
        description="Roles the identity performs.",
    )
    sectors: StringList | None = Field(
        default=None,
        description="Industry sectors the identity belongs to.",
    )
    contact_information: StrictStr | None = Field(
        default=None,
        description="Contact information (e-mail, phone number, etc.) of the identity.",
    )
