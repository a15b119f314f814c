"""Sighting."""

from typing import Literal

from pydantic import Field, StrictBool, StrictInt, StrictStr
from stix_sdk.core.pydantic import Identifier, IdentifierList, Timestamp
from stix_sdk.models._model_registry import RELATIONSHIP_OBJECTS
from stix_sdk.models.base_core_object import BaseRelationshipObject


@RELATIONSHIP_OBJECTS.register
class Sighting(BaseRelationshipObject):
    """Denote the belief that something was seen, e.g. an indicator or a malware."""

    type: Literal["sighting"] = Field(description="The type of the object.")
    sighting_of_ref: Identifier = Field(
        description="The object that was sighted.",
    )
    description: StrictStr | None = Field(
        default=None,
        description="Description of the sighting.",
    )
    first_seen: Timestamp | None = Field(
        default=None,
        description="The beginning of the time window of the sighting.",
    )
    last_seen: Timestamp | None = Field(
        default=None,
        description="The end of the time window of the sighting.",
    )
    count: StrictInt | None = Field(
        default=None,
        description="The number of times the object was sighted.",
        ge=0,
        le=999_999_999,
    )
    observed_data_refs: IdentifierList | None = Field(
        default=None,
        description="The observed-data objects holding the raw sighting data.",
    )
    where_sighted_refs: IdentifierList | None = Field(
        default=None,
        description="The identities or locations where the object was sighted.",
    )
    summary: StrictBool | None = Field(
        default=None,
        description="Whether the sighting is a summary of other sightings.",
    )
