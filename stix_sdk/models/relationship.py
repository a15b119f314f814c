"""Relationship."""

from typing import Literal

from pydantic import Field, StrictStr
from stix_sdk.core.pydantic import Identifier, Timestamp
from stix_sdk.models._model_registry import RELATIONSHIP_OBJECTS
from stix_sdk.models.base_core_object import BaseRelationshipObject
from stix_sdk.models.enums import RelationshipType


@RELATIONSHIP_OBJECTS.register
class Relationship(BaseRelationshipObject):
    """Link two objects, describing how they are related.

    Examples:
        >>> relationship = Relationship.new(
        ...     relationship_type="indicates",
        ...     source_ref="indicator--01234567-89ab-cdef-0123-456789abcdef",
        ...     target_ref="malware--fedcba98-7654-3210-fedc-ba9876543210",
        ... )
    """

    type: Literal["relationship"] = Field(description="The type of the object.")
    relationship_type: RelationshipType = Field(
        description="Type of the relationship.",
    )
    source_ref: Identifier = Field(
        description="The source object of the relationship.",
    )
    target_ref: Identifier = Field(
        description="The target object of the relationship.",
    )
    description: StrictStr | None = Field(
        default=None,
        description="Description of the relationship.",
    )
    start_time: Timestamp | None = Field(
        default=None,
        description="The time from which the relationship is believed to hold.",
    )
    stop_time: Timestamp | None = Field(
        default=None,
        description="The time from which the relationship is no longer believed to hold.",
    )
