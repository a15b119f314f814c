"""Bundle."""

import logging
from collections.abc import Mapping
from typing import Any, Literal, Self

from pydantic import Field
from stix_sdk.core.clock import Clock, UuidFactory
from stix_sdk.models.base_identified_object import BaseIdentifiedObject
from stix_sdk.models.base_object import BaseObject

logger = logging.getLogger(__name__)


class Bundle(BaseIdentifiedObject):
    """Represent a collection of arbitrary STIX objects grouped together.

    The bundle holds its objects as already-encoded JSON: decoding a bundle only
    validates the envelope, see `StixCodec.decode_bundle_objects` to decode its
    content. `objects` is always present on the wire, `[]` for an empty bundle.

    Examples:
        >>> Bundle.new().objects
        []
        >>> bundle = Bundle.new().add(Identity.new(name="ACME", identity_class="organization"))
        >>> bundle.objects[0]["type"]
        'identity'
    """

    type: Literal["bundle"] = Field(description="The type of the object.")
    objects: list[dict[str, Any]] = Field(
        description="The encoded objects of the bundle, in order.",
    )

    @classmethod
    def _generated_defaults(
        cls, values: dict[str, Any], clock: Clock, uuid_factory: UuidFactory
    ) -> dict[str, Any]:
        return {
            **super()._generated_defaults(values, clock, uuid_factory),
            "objects": [],
        }

    def add(self, obj: BaseObject | Mapping[str, Any]) -> Self:
        """Return a new bundle with `obj` appended, encoded.

        Args:
            obj (BaseObject | Mapping): A model, or an object already encoded.

        Returns:
            Bundle: The new bundle, this one is left untouched.
        """
        encoded = obj.encode() if isinstance(obj, BaseObject) else dict(obj)
        logger.debug("Appending %s to %s.", encoded.get("type"), self.id)
        return self.replace(objects=[*self.objects, encoded])
