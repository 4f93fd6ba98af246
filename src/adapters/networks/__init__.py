"""Built-in network profiles."""

from src.adapters.networks import eos, ethereum, ripple
from src.domain.entities.network import NetworkProfile

NETWORK_PROFILES: dict[str, NetworkProfile] = {
    ethereum.PROFILE.plugin_id: ethereum.PROFILE,
    ripple.PROFILE.plugin_id: ripple.PROFILE,
    eos.PROFILE.plugin_id: eos.PROFILE,
}

__all__ = ["NETWORK_PROFILES"]
