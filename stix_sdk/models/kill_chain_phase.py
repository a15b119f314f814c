"""KillChainPhase."""

from pydantic import Field, StrictStr
from stix_sdk.models.base_object import BaseObject


class KillChainPhase(BaseObject):
    """Represent a kill chain phase.

    Examples:
        >>> phase = KillChainPhase(kill_chain_name="lockheed-martin-cyber-kill-chain", phase_name="reconnaissance")
        >>> str(phase)
        'lockheed-martin-cyber-kill-chain,reconnaissance'
    """

    kill_chain_name: StrictStr = Field(description="Name of the kill chain.")
    phase_name: StrictStr = Field(description="Name of the kill chain phase.")

    def __str__(self) -> str:
        """Return `<chain>,<phase>`."""
        return f"{self.kill_chain_name},{self.phase_name}"
