"""ExternalReference."""

from pydantic import Field, StrictStr
from stix_sdk.core.pydantic import Hashes
from stix_sdk.models.base_object import BaseObject


class ExternalReference(BaseObject):
    """Represents an external reference to a source of information."""

    source_name: StrictStr = Field(
        description="The name of the source of the external reference.",
    )
    description: StrictStr | None = Field(
        default=None,
        description="Description of the external reference.",
    )
    url: StrictStr | None = Field(
        default=None,
        description="URL of the external reference.",
    )
    hashes: Hashes | None = Field(
        default=None,
        description="Hashes of the content pointed by the url.",
    )
    external_id: StrictStr | None = Field(
        default=None,
        description="An identifier for the external reference content.",
    )
