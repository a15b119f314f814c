"""Mutex."""

from typing import Literal

from pydantic import Field, StrictStr
from stix_sdk.models._model_registry import OBSERVABLES
from stix_sdk.models.base_observable import BaseObservable


@OBSERVABLES.register
class Mutex(BaseObservable):
    """Represent a mutual exclusion object."""

    type: Literal["mutex"] = Field(description="The type of the object.")
    name: StrictStr = Field(description="Name of the mutex.")
