"""Key management adapters."""

from src.adapters.keys.eth_key_manager import EthereumKeyManager
from src.adapters.keys.ripple_key_manager import RippleKeyManager

__all__ = ["EthereumKeyManager", "RippleKeyManager"]
