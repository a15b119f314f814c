"""GranularMarking."""

from pydantic import Field, StrictStr
from stix_sdk.core.pydantic import Identifier, StringList
from stix_sdk.models.base_object import BaseObject


class GranularMarking(BaseObject):
    """Apply a marking, or a language, to some properties of an object only."""

    selectors: StringList = Field(
        description="Selectors of the marked properties.",
        min_length=1,
    )
    marking_ref: Identifier | None = Field(
        default=None,
        description="The marking-definition applied to the selected properties.",
    )
    lang: StrictStr | None = Field(
        default=None,
        description="The language of the selected properties.",
    )
