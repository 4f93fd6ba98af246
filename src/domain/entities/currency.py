"""
Currency entities - Denominations and per-plugin currency information.
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

_MULTIPLIER_RE = re.compile(r"^10*$")


@dataclass(frozen=True)
class Denomination:
    """A named display unit and its scaling factor relative to native amounts."""
    
    name: str  # Display unit (e.g., ETH, mETH)
    multiplier: str  # Power of ten as digits (e.g., "1000000000000000000")
    symbol: str = ""
    
    def __post_init__(self) -> None:
        if not _MULTIPLIER_RE.match(self.multiplier):
            raise ValueError(
                f"Denomination {self.name!r} multiplier must be a power of ten, got {self.multiplier!r}"
            )
    
    @property
    def decimals(self) -> int:
        """Number of fractional digits the multiplier shifts by."""
        return len(self.multiplier) - 1


def freeze_mapping(data: Mapping[str, Any]) -> Mapping[str, Any]:
    """Recursively wrap nested dicts in read-only proxies."""
    return MappingProxyType({
        key: freeze_mapping(value) if isinstance(value, Mapping) else value
        for key, value in data.items()
    })


@dataclass(frozen=True)
class CurrencyInfo:
    """
    Immutable currency description owned by a plugin.
    
    The canonical denomination is the one named after the currency code.
    """
    
    plugin_id: str
    currency_code: str
    display_name: str
    denominations: tuple[Denomination, ...]
    default_network_fees: Mapping[str, Any] = field(default_factory=dict)
    
    def __post_init__(self) -> None:
        object.__setattr__(self, "denominations", tuple(self.denominations))
        object.__setattr__(
            self, "default_network_fees", freeze_mapping(self.default_network_fees)
        )
    
    def get_denomination(self, name: str) -> Optional[Denomination]:
        """Find a denomination by unit name."""
        for denomination in self.denominations:
            if denomination.name == name:
                return denomination
        return None
    
    @property
    def canonical_denomination(self) -> Optional[Denomination]:
        """Denomination used for URI amounts when no code is given."""
        return self.get_denomination(self.currency_code)


def thaw_mapping(data: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-copy a (possibly frozen) mapping into plain dicts."""
    return {
        key: thaw_mapping(value) if isinstance(value, Mapping) else value
        for key, value in data.items()
    }
