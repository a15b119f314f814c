"""Software."""

from typing import Literal

from pydantic import Field, StrictStr
from stix_sdk.core.pydantic import StringList
from stix_sdk.models._model_registry import OBSERVABLES
from stix_sdk.models.base_observable import BaseObservable


@OBSERVABLES.register
class Software(BaseObservable):
    """Represent high-level properties of a software product."""

    type: Literal["software"] = Field(description="The type of the object.")
    name: StrictStr = Field(description="Name of the software.")
    cpe: StrictStr | None = Field(
        default=None,
        description="Common Platform Enumeration entry of the software.",
    )
    swid: StrictStr | None = Field(
        default=None,
        description="Software Identification tag of the software.",
    )
    languages: StringList | None = Field(
        default=None,
        description="Supported languages, as ISO 639-2 codes.",
    )
    vendor: StrictStr | None = Field(
        default=None,
        description="Vendor of the software.",
    )
    version: StrictStr | None = Field(
        default=None,
        description="Version of the software.",
    )
