"""URL."""

from typing import Literal

from pydantic import Field, StrictStr
from stix_sdk.models._model_registry import OBSERVABLES
from stix_sdk.models.base_observable import BaseObservable


@OBSERVABLES.register
class URL(BaseObservable):
    """Represent a Uniform Resource Locator."""

    type: Literal["url"] = Field(description="The type of the object.")
    value: StrictStr = Field(description="The URL value.")
