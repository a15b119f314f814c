"""ObservedData."""

from typing import Any, Literal

from pydantic import Field, StrictInt, StrictStr
from stix_sdk.core.pydantic import IdentifierList, Timestamp
from stix_sdk.models._model_registry import DOMAIN_OBJECTS
from stix_sdk.models.base_core_object import BaseDomainObject


@DOMAIN_OBJECTS.register
class ObservedData(BaseDomainObject):
    """Represent information observed on systems and networks.

    Notes:
        - The deprecated `objects` map is kept as raw JSON, the way a Bundle keeps
          its objects: decode an entry with `StixCodec.decode_observable` on demand.
    """

    type: Literal["observed-data"] = Field(description="The type of the object.")
    first_observed: Timestamp = Field(
        description="The beginning of the time window of the observation.",
    )
    last_observed: Timestamp = Field(
        description="The end of the time window of the observation.",
    )
    number_observed: StrictInt = Field(
        description="The number of times the data was observed.",
        ge=1,
        le=999_999_999,
    )
    objects: dict[StrictStr, dict[StrictStr, Any]] | None = Field(
        default=None,
        description="Observed cyber observables, keyed by local reference (deprecated).",
    )
    object_refs: IdentifierList | None = Field(
        default=None,
        description="The observables and relationships observed.",
    )
