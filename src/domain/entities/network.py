"""
Network entities - Configuration-selected description of a chain family.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional

from src.domain.entities.currency import CurrencyInfo, freeze_mapping


class AddressFamily(str, Enum):
    """Address formats supported by the validators."""
    
    ACCOUNT_NAME = "account_name"  # Fixed-length account names (EOS)
    HEX_CHECKSUM = "hex_checksum"  # 0x-prefixed EIP-55 hex, optional prefix- (Ethereum)
    BASE58_FIXED = "base58_fixed"  # Base58check with fixed payload length (Ripple)


@dataclass(frozen=True)
class RedirectLink:
    """HTTPS link form that is rewritten into the native scheme."""
    
    host: str  # e.g. ripple.com
    path: str  # e.g. //send
    address_param: str = "to"
    schemes: tuple[str, ...] = ("https", "http")


@dataclass(frozen=True)
class NetworkProfile:
    """
    Tagged description of a network family.
    
    Selected by configuration at plugin construction; the codec and validators
    dispatch on `address_family` instead of subclassing.
    """
    
    currency_info: CurrencyInfo
    address_family: AddressFamily
    uri_schemes: tuple[str, ...]  # First entry is used when encoding
    wallet_types: tuple[str, ...]
    unique_identifier_params: tuple[str, ...] = ()
    redirect: Optional[RedirectLink] = None
    uri_amount_precision: int = 18
    engine_defaults: Mapping[str, Any] = field(default_factory=dict)
    
    def __post_init__(self) -> None:
        if not self.uri_schemes:
            raise ValueError(f"{self.plugin_id} must register at least one URI scheme")
        object.__setattr__(self, "engine_defaults", freeze_mapping(self.engine_defaults))
    
    @property
    def plugin_id(self) -> str:
        return self.currency_info.plugin_id
    
    @property
    def primary_scheme(self) -> str:
        return self.uri_schemes[0]
    
    def recognizes_scheme(self, scheme: str) -> bool:
        """Check if a URI scheme is one of this network's aliases."""
        return scheme.lower() in self.uri_schemes
