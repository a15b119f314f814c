"""Artifact."""

from typing import Literal

from pydantic import Field, StrictStr
from stix_sdk.core.pydantic import Hashes
from stix_sdk.models._model_registry import OBSERVABLES
from stix_sdk.models.base_observable import BaseObservable


@OBSERVABLES.register
class Artifact(BaseObservable):
    """Represent an array of bytes, either inline (base64) or referenced by URL."""

    type: Literal["artifact"] = Field(description="The type of the object.")
    mime_type: StrictStr | None = Field(
        default=None,
        description="MIME type of the artifact.",
    )
    payload_bin: StrictStr | None = Field(
        default=None,
        description="Base64-encoded binary data of the artifact.",
    )
    url: StrictStr | None = Field(
        default=None,
        description="URL of the artifact content.",
    )
    hashes: Hashes | None = Field(
        default=None,
        description="Hashes of the content pointed by the url.",
    )
    encryption_algorithm: StrictStr | None = Field(
        default=None,
        description="Encryption algorithm of the payload or the content.",
    )
    decryption_key: StrictStr | None = Field(
        default=None,
        description="Decryption key of the encrypted content.",
    )
