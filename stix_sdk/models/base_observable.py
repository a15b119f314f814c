"""Offer the base class of the cyber observables."""

from abc import ABC
from collections.abc import Mapping
from typing import Any

from pydantic import (
    Field,
    SerializeAsAny,
    StrictBool,
    StrictStr,
    ValidationInfo,
    field_validator,
)
from stix_sdk.core.clock import Clock, UuidFactory
from stix_sdk.core.pydantic import IdentifierList
from stix_sdk.models._model_registry import EXTENSIONS, registry_from_context
from stix_sdk.models.base_core_object import SPEC_VERSION
from stix_sdk.models.base_identified_object import BaseIdentifiedObject
from stix_sdk.models.extensions import BaseExtension
from stix_sdk.models.granular_marking import GranularMarking


class BaseObservable(BaseIdentifiedObject, ABC):
    """Base class for STIX Cyber-observable Objects.

    This class must be subclassed to create specific observable types.

    Notes:
    - Each entry of `extensions` is decoded by the extension registered under its
      key. Unknown keys are accepted only for custom names (`x-...`,
      `extension-definition--...`).

    """

    spec_version: StrictStr | None = Field(
        default=None,
        description="The version of the STIX specification used to represent the object.",
    )
    object_marking_refs: IdentifierList | None = Field(
        default=None,
        description="The marking-definitions applied to the observable.",
    )
    granular_markings: list[GranularMarking] | None = Field(
        default=None,
        description="The markings applied to some properties of the observable.",
    )
    defanged: StrictBool | None = Field(
        default=None,
        description="Whether the data of the observable has been defanged.",
    )
    extensions: dict[StrictStr, SerializeAsAny[BaseExtension]] | None = Field(
        default=None,
        description="The extensions of the observable, keyed by extension name.",
    )

    @field_validator("extensions", mode="before")
    @classmethod
    def _decode_extensions(cls, value: Any, info: ValidationInfo) -> Any:
        if not isinstance(value, Mapping):
            return value
        registry = registry_from_context(info.context, "extensions", EXTENSIONS)
        return {
            name: registry.decode(
                name, extension, context=info.context, loc=("extensions", name)
            )
            for name, extension in value.items()
        }

    @classmethod
    def _generated_defaults(
        cls, values: dict[str, Any], clock: Clock, uuid_factory: UuidFactory
    ) -> dict[str, Any]:
        return {
            **super()._generated_defaults(values, clock, uuid_factory),
            "spec_version": SPEC_VERSION,
        }
