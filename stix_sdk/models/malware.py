"""Malware."""

from typing import Literal

from pydantic import Field, StrictBool, StrictStr
from stix_sdk.core.pydantic import IdentifierList, StringList, Timestamp
from stix_sdk.models._model_registry import DOMAIN_OBJECTS
from stix_sdk.models.base_core_object import BaseDomainObject
from stix_sdk.models.enums import MalwareType
from stix_sdk.models.kill_chain_phase import KillChainPhase


@DOMAIN_OBJECTS.register
class Malware(BaseDomainObject):
    """Represent a malware family or instance.

    Examples:
        >>> malware = Malware.new(name="Cryptolocker", malware_types=["ransomware"], is_family=True)
    """

    type: Literal["malware"] = Field(description="The type of the object.")
    name: StrictStr = Field(description="Name of the malware.")
    description: StrictStr | None = Field(
        default=None,
        description="Description of the malware.",
    )
    malware_types: list[MalwareType] | None = Field(
        default=None,
        description="Categorization of the malware.",
    )
    is_family: StrictBool | None = Field(
        default=None,
        description="Whether the object represents a malware family rather than an instance.",
    )
    aliases: StringList | None = Field(
        default=None,
        description="Alternative names of the malware.",
    )
    kill_chain_phases: list[KillChainPhase] | None = Field(
        default=None,
        description="Kill chain phases in which the malware can be used.",
    )
    first_seen: Timestamp | None = Field(
        default=None,
        description="The time the malware was first seen.",
    )
    last_seen: Timestamp | None = Field(
        default=None,
        description="The time the malware was last seen.",
    )
    operating_system_refs: IdentifierList | None = Field(
        default=None,
        description="Software objects of the operating systems the malware runs on.",
    )
    architecture_execution_envs: StringList | None = Field(
        default=None,
        description="Processor architectures the malware runs on.",
    )
    implementation_languages: StringList | None = Field(
        default=None,
        description="Programming languages used to implement the malware.",
    )
    capabilities: StringList | None = Field(
        default=None,
        description="Capabilities of the malware.",
    )
    sample_refs: IdentifierList | None = Field(
        default=None,
        description="File or artifact objects holding samples of the malware.",
    )
