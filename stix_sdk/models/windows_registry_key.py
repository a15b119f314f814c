"""WindowsRegistryKey."""

from typing import Literal

from pydantic import Field, StrictInt, StrictStr
from stix_sdk.core.pydantic import Identifier, Timestamp
from stix_sdk.models._model_registry import OBSERVABLES
from stix_sdk.models.base_object import BaseObject
from stix_sdk.models.base_observable import BaseObservable


class WindowsRegistryValue(BaseObject):
    """A value of a Windows registry key."""

    name: StrictStr | None = Field(
        default=None,
        description="Name of the value, empty for the default value.",
    )
    data: StrictStr | None = Field(
        default=None,
        description="Data held by the value.",
    )
    data_type: StrictStr | None = Field(
        default=None,
        description="Registry data type (REG_SZ, REG_DWORD, ...).",
    )


@OBSERVABLES.register
class WindowsRegistryKey(BaseObservable):
    """Represent the properties of a Windows registry key."""

    type: Literal["windows-registry-key"] = Field(description="The type of the object.")
    key: StrictStr | None = Field(
        default=None,
        description="Full registry key, hive included.",
    )
    values: list[WindowsRegistryValue] | None = Field(
        default=None,
        description="Values found under the key.",
    )
    modified_time: Timestamp | None = Field(
        default=None,
        description="Last modification time of the key.",
    )
    creator_user_ref: Identifier | None = Field(
        default=None,
        description="The user account that created the key.",
    )
    number_of_subkeys: StrictInt | None = Field(
        default=None,
        description="Number of subkeys of the key.",
        ge=0,
    )
