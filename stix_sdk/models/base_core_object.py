"""BaseCoreObject."""

from __future__ import annotations

from abc import ABC
from typing import Any

from pydantic import Field, StrictBool, StrictStr
from stix_sdk.core.clock import Clock, UuidFactory
from stix_sdk.core.pydantic import Confidence, Identifier, IdentifierList, StringList, Timestamp
from stix_sdk.models.base_identified_object import BaseIdentifiedObject
from stix_sdk.models.external_reference import ExternalReference
from stix_sdk.models.granular_marking import GranularMarking

SPEC_VERSION = "2.1"


class BaseCoreObject(BaseIdentifiedObject, ABC):
    """Common properties of every STIX Domain Object and Relationship Object.

    Any variant added to either family gets this whole shape.
    """

    spec_version: StrictStr = Field(
        description="The version of the STIX specification used to represent the object.",
    )
    created: Timestamp = Field(
        description="The time at which the object was originally created.",
    )
    modified: Timestamp = Field(
        description="The time that this particular version of the object was last modified.",
    )
    created_by_ref: Identifier | None = Field(
        default=None,
        description="The identity that created the object.",
    )
    revoked: StrictBool | None = Field(
        default=None,
        description="Whether the object has been revoked.",
    )
    labels: StringList | None = Field(
        default=None,
        description="Terms describing the object.",
    )
    confidence: Confidence | None = Field(
        default=None,
        description="Confidence the creator has in the correctness of the data, 0 to 100.",
    )
    lang: StrictStr | None = Field(
        default=None,
        description="Language of the text content of the object.",
    )
    external_references: list[ExternalReference] | None = Field(
        default=None,
        description="External references of the object.",
    )
    object_marking_refs: IdentifierList | None = Field(
        default=None,
        description="The marking-definitions applied to the object.",
    )
    granular_markings: list[GranularMarking] | None = Field(
        default=None,
        description="The markings applied to some properties of the object.",
    )

    @classmethod
    def _generated_defaults(
        cls, values: dict[str, Any], clock: Clock, uuid_factory: UuidFactory
    ) -> dict[str, Any]:
        instant = clock.now()
        return {
            **super()._generated_defaults(values, clock, uuid_factory),
            "spec_version": SPEC_VERSION,
            "created": instant,
            "modified": values.get("created", instant),
        }


class BaseDomainObject(BaseCoreObject, ABC):
    """Base class of the STIX Domain Objects (SDO) family."""


class BaseRelationshipObject(BaseCoreObject, ABC):
    """Base class of the STIX Relationship Objects (SRO) family."""
