"""IntrusionSet."""

from typing import Literal

from pydantic import Field, StrictStr
from stix_sdk.core.pydantic import StringList, Timestamp
from stix_sdk.models._model_registry import DOMAIN_OBJECTS
from stix_sdk.models.base_core_object import BaseDomainObject
from stix_sdk.models.enums import AttackMotivation, AttackResourceLevel


@DOMAIN_OBJECTS.register
class IntrusionSet(BaseDomainObject):
    """Represent a grouped set of adversarial behaviors believed to be orchestrated by a single organization."""

    type: Literal["intrusion-set"] = Field(description="The type of the object.")
    name: StrictStr = Field(description="Name of the intrusion set.")
    description: StrictStr | None = Field(
        default=None,
        description="Description of the intrusion set.",
    )
    aliases: StringList | None = Field(
        default=None,
        description="Alternative names of the intrusion set.",
    )
    first_seen: Timestamp | None = Field(
        default=None,
        description="The time the intrusion set was first seen.",
    )
    last_seen: Timestamp | None = Field(
        default=None,
        description="The time the intrusion set was last seen.",
    )
    goals: StringList | None = Field(
        default=None,
        description="High-level goals of the intrusion set.",
    )
    resource_level: AttackResourceLevel | None = Field(
        default=None,
        description="The organizational level at which the intrusion set operates.",
    )
    primary_motivation: AttackMotivation | None = Field(
        default=None,
        description="The primary reason behind the intrusion set.",
    )
    secondary_motivations: list[AttackMotivation] | None = Field(
        default=None,
        description="The secondary reasons behind the intrusion set.",
    )
