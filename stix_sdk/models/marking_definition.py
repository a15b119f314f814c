"""MarkingDefinition and its marking objects."""

from __future__ import annotations

from abc import ABC
from collections.abc import Mapping
from typing import Any, ClassVar, Literal

from pydantic import (
    Field,
    SerializeAsAny,
    StrictStr,
    ValidationInfo,
    model_validator,
)
from stix_sdk.core.clock import Clock, UuidFactory
from stix_sdk.core.pydantic import Identifier, IdentifierList, Timestamp
from stix_sdk.models._model_registry import MARKINGS, registry_from_context
from stix_sdk.models.base_core_object import SPEC_VERSION
from stix_sdk.models.base_identified_object import BaseIdentifiedObject
from stix_sdk.models.base_object import BaseObject
from stix_sdk.models.external_reference import ExternalReference
from stix_sdk.models.granular_marking import GranularMarking


class BaseMarkingObject(BaseObject, ABC):
    """Base class of the marking objects, selected by `definition_type`."""

    definition_type: ClassVar[str]

    @classmethod
    def discriminator(cls) -> str | None:
        """Return the `definition_type` selecting this marking object."""
        return getattr(cls, "definition_type", None)


@MARKINGS.register
class TLPMarking(BaseMarkingObject):
    """Traffic Light Protocol marking.

    Examples:
        >>> TLPMarking(tlp="amber").encode()
        {'tlp': 'amber'}
    """

    definition_type: ClassVar[str] = "tlp"

    tlp: Literal["white", "green", "amber", "red"] = Field(
        description="The TLP level.",
    )


@MARKINGS.register
class StatementMarking(BaseMarkingObject):
    """Copyright, terms of use or any other statement applied to the content."""

    definition_type: ClassVar[str] = "statement"

    statement: StrictStr = Field(description="The statement text.")


class MarkingDefinition(BaseIdentifiedObject):
    """Represent a marking definition.

    The `definition` is decoded according to `definition_type`; an unknown
    `definition_type` is rejected.

    Examples:
        >>> marking = MarkingDefinition.new(
        ...     name="Copyright ACME",
        ...     definition=StatementMarking(statement="Copyright 2016, ACME Inc."),
        ... )
        >>> marking.definition_type
        'statement'
    """

    type: Literal["marking-definition"] = Field(description="The type of the object.")
    spec_version: StrictStr = Field(
        description="The version of the STIX specification used to represent the object.",
    )
    created: Timestamp = Field(
        description="The time at which the marking definition was created.",
    )
    definition_type: StrictStr = Field(
        description="The type of the marking definition (tlp, statement).",
    )
    definition: SerializeAsAny[BaseMarkingObject] = Field(
        description="The marking object itself.",
    )
    name: StrictStr | None = Field(
        default=None,
        description="Name of the marking definition.",
    )
    created_by_ref: Identifier | None = Field(
        default=None,
        description="The identity that created the marking definition.",
    )
    external_references: list[ExternalReference] | None = Field(
        default=None,
        description="External references of the marking definition.",
    )
    object_marking_refs: IdentifierList | None = Field(
        default=None,
        description="The marking-definitions applied to this marking definition.",
    )
    granular_markings: list[GranularMarking] | None = Field(
        default=None,
        description="The markings applied to some properties of the marking definition.",
    )

    @model_validator(mode="before")
    @classmethod
    def _decode_definition(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, Mapping):
            return data
        definition_type = data.get("definition_type")
        if not isinstance(definition_type, str) or "definition" not in data:
            return data  # reported by field validation
        registry = registry_from_context(info.context, "markings", MARKINGS)
        return {
            **data,
            "definition": registry.decode(
                definition_type,
                data["definition"],
                context=info.context,
                loc=("definition",),
            ),
        }

    @classmethod
    def _generated_defaults(
        cls, values: dict[str, Any], clock: Clock, uuid_factory: UuidFactory
    ) -> dict[str, Any]:
        defaults = {
            **super()._generated_defaults(values, clock, uuid_factory),
            "spec_version": SPEC_VERSION,
            "created": clock.now(),
        }
        definition = values.get("definition")
        if isinstance(definition, BaseMarkingObject):
            defaults["definition_type"] = definition.discriminator()
        return defaults


def _tlp_marking(uuid: str, level: Literal["white", "green", "amber", "red"]) -> MarkingDefinition:
    return MarkingDefinition(
        type="marking-definition",
        spec_version=SPEC_VERSION,
        id=Identifier("marking-definition", uuid),
        created="2017-01-20T00:00:00.000Z",
        definition_type="tlp",
        name=f"TLP:{level.upper()}",
        definition=TLPMarking(tlp=level),
    )


TLP_WHITE = _tlp_marking("613f2e26-407d-48c7-9eca-b8e91df99dc9", "white")
TLP_GREEN = _tlp_marking("34098fce-860f-48ae-8e50-ebd3cc5e41da", "green")
TLP_AMBER = _tlp_marking("f88d31f6-486f-44da-b317-01333bde0b82", "amber")
TLP_RED = _tlp_marking("5e57c739-391a-4eb3-b6be-7d15ca92d5ed", "red")
