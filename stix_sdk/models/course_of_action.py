"""CourseOfAction."""

from typing import Literal

from pydantic import Field, StrictStr
from stix_sdk.models._model_registry import DOMAIN_OBJECTS
from stix_sdk.models.base_core_object import BaseDomainObject


@DOMAIN_OBJECTS.register
class CourseOfAction(BaseDomainObject):
    """Represent an action taken to prevent or respond to an attack."""

    type: Literal["course-of-action"] = Field(description="The type of the object.")
    name: StrictStr = Field(description="Name of the course of action.")
    description: StrictStr | None = Field(
        default=None,
        description="Description of the course of action.",
    )
