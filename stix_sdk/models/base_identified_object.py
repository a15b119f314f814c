"""BaseIdentifiedObject."""

from __future__ import annotations

import logging
from abc import ABC
from collections.abc import Mapping
from typing import Any, Literal, Self, get_args, get_origin

import stix2
from pydantic import Field, StrictStr
from stix_sdk.core.clock import SYSTEM_CLOCK, Clock, UuidFactory, random_uuid
from stix_sdk.core.pydantic import Identifier
from stix_sdk.models.base_object import BaseObject

logger = logging.getLogger(__name__)


class BaseIdentifiedObject(BaseObject, ABC):
    """Base class for top-level STIX objects, identified by their `id`.

    Subclasses pin their discriminator by narrowing `type` to a `Literal`.
    """

    type: StrictStr = Field(
        description="The type of the object, also the kind of its identifier.",
    )
    id: Identifier = Field(
        description="The identifier of the object.",
    )

    @classmethod
    def discriminator(cls) -> str | None:
        """Return the `type` value pinned by the model, None for catch-all models."""
        annotation = cls.model_fields["type"].annotation
        if get_origin(annotation) is Literal:
            return str(get_args(annotation)[0])
        return None

    @classmethod
    def new(
        cls,
        *,
        clock: Clock = SYSTEM_CLOCK,
        uuid_factory: UuidFactory = random_uuid,
        custom_properties: Mapping[str, Any] | None = None,
        **fields: Any,
    ) -> Self:
        """Build a new object, generating the properties the caller omitted.

        Args:
            clock (Clock): Source of `created` / `modified` instants.
            uuid_factory (Callable): Source of the `id` uuid.
            custom_properties (Mapping): Properties outside of the model. A name
                colliding with a declared field is dropped.
            **fields: The declared fields.

        Examples:
            >>> report = Report.new(name="APT1", published="2016-01-20T12:31:12Z", object_refs=[])
            >>> report.id.kind
            'report'
        """
        values = dict(fields)
        for name, value in cls._generated_defaults(values, clock, uuid_factory).items():
            values.setdefault(name, value)
        for name, value in (custom_properties or {}).items():
            if name in cls.model_fields:
                logger.warning(
                    "Custom property %r collides with a %s field, dropped.",
                    name,
                    cls.__name__,
                )
                continue
            values[name] = value
        return cls(**values)

    @classmethod
    def _generated_defaults(
        cls, values: dict[str, Any], clock: Clock, uuid_factory: UuidFactory
    ) -> dict[str, Any]:
        kind = values.get("type") or cls.discriminator()
        if not kind:
            raise TypeError(f"{cls.__name__}.new() requires an explicit 'type'.")
        return {"type": kind, "id": Identifier(kind, uuid_factory())}

    def to_stix2_object(self) -> Any:
        """Make stix object from the stix2 python lib, custom properties allowed."""
        return stix2.parse(self.encode(), allow_custom=True, version="2.1")
