"""
Wallet entities - Key material handed over by the wallet core.
"""

from dataclasses import dataclass, field
from typing import Any

WALLET_TYPE_PREFIX = "wallet:"


@dataclass
class WalletInfo:
    """Wallet type and its stored keys."""
    
    type: str  # e.g. "wallet:ethereum"
    keys: dict[str, Any] = field(default_factory=dict)
    
    @property
    def bare_type(self) -> str:
        """Wallet type without the `wallet:` prefix."""
        return strip_wallet_prefix(self.type)


def strip_wallet_prefix(wallet_type: str) -> str:
    if wallet_type.startswith(WALLET_TYPE_PREFIX):
        return wallet_type[len(WALLET_TYPE_PREFIX):]
    return wallet_type
