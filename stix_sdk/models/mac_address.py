"""MACAddress."""

from typing import Literal

from pydantic import Field, StrictStr
from stix_sdk.models._model_registry import OBSERVABLES
from stix_sdk.models.base_observable import BaseObservable


@OBSERVABLES.register
class MACAddress(BaseObservable):
    """Represent a single Media Access Control (MAC) address."""

    type: Literal["mac-addr"] = Field(description="The type of the object.")
    value: StrictStr = Field(description="The MAC address value.")
