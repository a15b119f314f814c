"""Campaign."""

from typing import Literal

from pydantic import Field, StrictStr
from stix_sdk.core.pydantic import StringList, Timestamp
from stix_sdk.models._model_registry import DOMAIN_OBJECTS
from stix_sdk.models.base_core_object import BaseDomainObject


@DOMAIN_OBJECTS.register
class Campaign(BaseDomainObject):
    """Represent a grouping of adversarial behaviors over a period of time against specific targets."""

    type: Literal["campaign"] = Field(description="The type of the object.")
    name: StrictStr = Field(description="Name of the campaign.")
    description: StrictStr | None = Field(
        default=None,
        description="Description of the campaign.",
    )
    aliases: StringList | None = Field(
        default=None,
        description="Alternative names of the campaign.",
    )
    first_seen: Timestamp | None = Field(
        default=None,
        description="The time the campaign was first seen.",
    )
    last_seen: Timestamp | None = Field(
        default=None,
        description="The time the campaign was last seen.",
    )
    objective: StrictStr | None = Field(
        default=None,
        description="The primary goal of the campaign.",
    )
