"""AutonomousSystem."""

from typing import Literal

from pydantic import Field, StrictInt, StrictStr
from stix_sdk.models._model_registry import OBSERVABLES
from stix_sdk.models.base_observable import BaseObservable


@OBSERVABLES.register
class AutonomousSystem(BaseObservable):
    """Represent an Autonomous System (AS)."""

    type: Literal["autonomous-system"] = Field(description="The type of the object.")
    number: StrictInt = Field(description="The number assigned to the AS.")
    name: StrictStr | None = Field(
        default=None,
        description="Name of the AS.",
    )
    rir: StrictStr | None = Field(
        default=None,
        description="Regional Internet Registry that assigned the number.",
    )
