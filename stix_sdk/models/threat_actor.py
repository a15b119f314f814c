"""ThreatActor."""

from typing import Literal

from pydantic import Field, StrictStr
from stix_sdk.core.pydantic import StringList, Timestamp
from stix_sdk.models._model_registry import DOMAIN_OBJECTS
from stix_sdk.models.base_core_object import BaseDomainObject
from stix_sdk.models.enums import (
    AttackMotivation,
    AttackResourceLevel,
    ThreatActorRole,
    ThreatActorSophistication,
    ThreatActorType,
)


@DOMAIN_OBJECTS.register
class ThreatActor(BaseDomainObject):
    """Represent individuals, groups or organizations believed to operate with malicious intent."""

    type: Literal["threat-actor"] = Field(description="The type of the object.")
    name: StrictStr = Field(description="Name of the threat actor.")
    description: StrictStr | None = Field(
        default=None,
        description="Description of the threat actor.",
    )
    threat_actor_types: list[ThreatActorType] | None = Field(
        default=None,
        description="Categorization of the threat actor.",
    )
    aliases: StringList | None = Field(
        default=None,
        description="Alternative names of the threat actor.",
    )
    first_seen: Timestamp | None = Field(
        default=None,
        description="The time the threat actor was first seen.",
    )
    last_seen: Timestamp | None = Field(
        default=None,
        description="The time the threat actor was last seen.",
    )
    roles: list[ThreatActorRole] | None = Field(
        default=None,
        description="Roles the threat actor plays.",
    )
    goals: StringList | None = Field(
        default=None,
        description="High-level goals of the threat actor.",
    )
    sophistication: ThreatActorSophistication | None = Field(
        default=None,
        description="Skill level of the threat actor.",
    )
    resource_level: AttackResourceLevel | None = Field(
        default=None,
        description="The organizational level at which the threat actor operates.",
    )
    primary_motivation: AttackMotivation | None = Field(
        default=None,
        description="The primary reason behind the threat actor.",
    )
    secondary_motivations: list[AttackMotivation] | None = Field(
        default=None,
        description="The secondary reasons behind the threat actor.",
    )
    personal_motivations: list[AttackMotivation] | None = Field(
        default=None,
        description="The personal reasons behind the threat actor.",
    )
