"""EmailAddress."""

from typing import Literal

from pydantic import Field, StrictStr
from stix_sdk.core.pydantic import Identifier
from stix_sdk.models._model_registry import OBSERVABLES
from stix_sdk.models.base_observable import BaseObservable


@OBSERVABLES.register
class EmailAddress(BaseObservable):
    """Represent a single email address."""

    type: Literal["email-addr"] = Field(description="The type of the object.")
    value: StrictStr = Field(description="The email address.")
    display_name: StrictStr | None = Field(
        default=None,
        description="Display name of the owner of the address.",
    )
    belongs_to_ref: Identifier | None = Field(
        default=None,
        description="The user account the address belongs to.",
    )
