"""AttackPattern."""

from typing import Literal

from pydantic import Field, StrictStr
from stix_sdk.core.pydantic import StringList
from stix_sdk.models._model_registry import DOMAIN_OBJECTS
from stix_sdk.models.base_core_object import BaseDomainObject
from stix_sdk.models.kill_chain_phase import KillChainPhase


@DOMAIN_OBJECTS.register
class AttackPattern(BaseDomainObject):
    """Represent an attack pattern, a TTP describing how adversaries compromise targets.

    Examples:
        >>> attack_pattern = AttackPattern.new(
        ...     name="Spear Phishing",
        ...     kill_chain_phases=[
        ...         KillChainPhase(kill_chain_name="mitre-attack", phase_name="initial-access"),
        ...     ],
        ... )
    """

    type: Literal["attack-pattern"] = Field(description="The type of the object.")
    name: StrictStr = Field(description="Name of the attack pattern.")
    description: StrictStr | None = Field(
        default=None,
        description="Description of the attack pattern.",
    )
    aliases: StringList | None = Field(
        default=None,
        description="Alternative names of the attack pattern.",
    )
    kill_chain_phases: list[KillChainPhase] | None = Field(
        default=None,
        description="Kill chain phases in which the attack pattern is used.",
    )
