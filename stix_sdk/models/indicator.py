"""Indicator."""

from typing import Literal

from pydantic import Field, StrictStr
from stix_sdk.core.pydantic import Timestamp
from stix_sdk.models._model_registry import DOMAIN_OBJECTS
from stix_sdk.models.base_core_object import BaseDomainObject
from stix_sdk.models.enums import IndicatorType
from stix_sdk.models.kill_chain_phase import KillChainPhase


@DOMAIN_OBJECTS.register
class Indicator(BaseDomainObject):
    """Represent a pattern that can be used to detect suspicious or malicious activity.

    Examples:
        >>> indicator = Indicator.new(
        ...     pattern="[file:hashes.'SHA-256' = 'aec070645fe53ee3b3763059376134f058cc337247c978add178b6ccdfb0019f']",
        ...     pattern_type="stix",
        ...     valid_from="2016-01-20T12:31:12Z",
        ... )

    Notes:
        - The pattern is kept as an opaque string: it is not parsed.
        - `valid_until` and `labels` are optional.
    """

    type: Literal["indicator"] = Field(description="The type of the object.")
    pattern: StrictStr = Field(description="The detection pattern of the indicator.")
    valid_from: Timestamp = Field(
        description="The time from which the indicator is considered valid.",
    )
    name: StrictStr | None = Field(
        default=None,
        description="Name of the indicator.",
    )
    description: StrictStr | None = Field(
        default=None,
        description="Description of the indicator.",
    )
    indicator_types: list[IndicatorType] | None = Field(
        default=None,
        description="Categorization of the indicator.",
    )
    pattern_type: StrictStr | None = Field(
        default=None,
        description="The pattern language used (stix, snort, yara, ...).",
    )
    pattern_version: StrictStr | None = Field(
        default=None,
        description="The version of the pattern language.",
    )
    valid_until: Timestamp | None = Field(
        default=None,
        description="The time at which the indicator should no longer be considered valid.",
    )
    kill_chain_phases: list[KillChainPhase] | None = Field(
        default=None,
        description="Kill chain phases to which the indicator corresponds.",
    )
