"""
Domain ports - Interface definitions for hexagonal architecture.
"""

from src.domain.ports.key_management_port import KeyManagementPort
from src.domain.ports.wallet_store_port import WalletStorePort

__all__ = [
    "KeyManagementPort",
    "WalletStorePort",
]
