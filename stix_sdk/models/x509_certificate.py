"""X509Certificate."""

from typing import Literal

from pydantic import Field, StrictBool, StrictInt, StrictStr
from stix_sdk.core.pydantic import Hashes, Timestamp
from stix_sdk.models._model_registry import OBSERVABLES
from stix_sdk.models.base_observable import BaseObservable
from stix_sdk.models.extensions import X509V3Extensions


@OBSERVABLES.register
class X509Certificate(BaseObservable):
    """Represent the properties of an X.509 certificate."""

    type: Literal["x509-certificate"] = Field(description="The type of the object.")
    is_self_signed: StrictBool | None = None
    hashes: Hashes | None = Field(
        default=None,
        description="Hashes of the encoded certificate.",
    )
    version: StrictStr | None = None
    serial_number: StrictStr | None = None
    signature_algorithm: StrictStr | None = None
    issuer: StrictStr | None = Field(
        default=None,
        description="Name of the Certificate Authority that issued the certificate.",
    )
    validity_not_before: Timestamp | None = None
    validity_not_after: Timestamp | None = None
    subject: StrictStr | None = Field(
        default=None,
        description="Name of the entity the public key belongs to.",
    )
    subject_public_key_algorithm: StrictStr | None = None
    subject_public_key_modulus: StrictStr | None = None
    subject_public_key_exponent: StrictInt | None = None
    x509_v3_extensions: X509V3Extensions | None = Field(
        default=None,
        description="X.509 v3 extensions of the certificate.",
    )
