"""Tool."""

from typing import Literal

from pydantic import Field, StrictStr
from stix_sdk.core.pydantic import StringList
from stix_sdk.models._model_registry import DOMAIN_OBJECTS
from stix_sdk.models.base_core_object import BaseDomainObject
from stix_sdk.models.enums import ToolType
from stix_sdk.models.kill_chain_phase import KillChainPhase


@DOMAIN_OBJECTS.register
class Tool(BaseDomainObject):
    """Represent legitimate software that can be used by threat actors to perform attacks."""

    type: Literal["tool"] = Field(description="The type of the object.")
    name: StrictStr = Field(description="Name of the tool.")
    description: StrictStr | None = Field(
        default=None,
        description="Description of the tool.",
    )
    tool_types: list[ToolType] | None = Field(
        default=None,
        description="Categorization of the tool.",
    )
    aliases: StringList | None = Field(
        default=None,
        description="Alternative names of the tool.",
    )
    kill_chain_phases: list[KillChainPhase] | None = Field(
        default=None,
        description="Kill chain phases in which the tool can be used.",
    )
    tool_version: StrictStr | None = Field(
        default=None,
        description="The version of the tool.",
    )
