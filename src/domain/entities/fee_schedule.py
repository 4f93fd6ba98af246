"""
Fee schedule entities - Per-network gas limits and gas price tiers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

# Raw table: network id -> {"gasLimit": {...}, "gasPrice": {...}}
FeeSchedule = Mapping[str, Mapping[str, Mapping[str, str]]]

DEFAULT_NETWORK = "default"
GAS_LIMIT = "gasLimit"
GAS_PRICE = "gasPrice"

REQUIRED_GAS_LIMIT_KEYS = ("regularTransaction", "tokenTransaction")
REQUIRED_GAS_PRICE_KEYS = (
    "lowFee",
    "standardFeeLow",
    "standardFeeHigh",
    "standardFeeLowAmount",
    "standardFeeHighAmount",
    "highFee",
)


class FeeOption(str, Enum):
    """Fee tier requested by the user."""
    
    LOW = "low"
    STANDARD = "standard"
    HIGH = "high"
    CUSTOM = "custom"


@dataclass(frozen=True)
class ResolvedFeeSchedule:
    """Fully populated fee schedule for a single network."""
    
    gas_limit: Mapping[str, str]
    gas_price: Mapping[str, str]
    network_id: str = DEFAULT_NETWORK
    
    def to_dict(self) -> dict[str, Any]:
        """Convert to the raw table shape."""
        return {
            GAS_LIMIT: dict(self.gas_limit),
            GAS_PRICE: dict(self.gas_price),
        }


@dataclass(frozen=True)
class FeeParameters:
    """Concrete cost parameters for one transaction."""
    
    gas_price: str
    gas_limit: str
    fee_option: FeeOption = FeeOption.STANDARD
    custom: Optional[Mapping[str, str]] = None
    
    @property
    def max_fee(self) -> str:
        """Upper bound of the network fee in native units."""
        return str(int(self.gas_price) * int(self.gas_limit))
