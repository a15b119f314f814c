"""BaseObject."""

from abc import ABC
from typing import Any, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    model_serializer,
)
from stix_sdk.core.pydantic import stix_object_serializer


class BaseObject(BaseModel, ABC):
    """Represent Base Object for STIX models.

    Every unknown property met while validating is kept as a custom property and
    written back, after the declared fields, when encoding.
    """

    model_config = ConfigDict(
        extra="allow",  # unknown properties are custom properties
        frozen=True,
    )

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        return stix_object_serializer(self, handler)

    def __hash__(self) -> int:
        """Create a hash based on the model's json representation dynamically."""
        return hash(self.model_dump_json())

    def __eq__(self, other: Any) -> bool:
        """Implement comparison between similar object."""
        if not isinstance(other, BaseObject):
            return NotImplemented
        return type(self) is type(other) and self.encode() == other.encode()

    @classmethod
    def discriminator(cls) -> str | None:
        """Return the value selecting this model within its family, if fixed."""
        return None

    @property
    def custom_properties(self) -> dict[str, Any]:
        """Return the properties not declared by the model."""
        return dict(self.model_extra or {})

    def encode(self) -> dict[str, Any]:
        """Return the JSON value of the object, custom properties included."""
        return self.model_dump(mode="json")

    def replace(self, **changes: Any) -> Self:
        """Return a validated copy of the object with `changes` applied.

        Examples:
            >>> phase = KillChainPhase(kill_chain_name="lockheed", phase_name="recon")
            >>> phase.replace(phase_name="delivery").phase_name
            'delivery'
        """
        values = {name: getattr(self, name) for name in type(self).model_fields}
        values.update(self.custom_properties)
        values.update(changes)
        return type(self)(**values)
