"""
Wallet Store Port - Interface for per-wallet engine data.
"""

from abc import ABC, abstractmethod
from typing import Any


class WalletStorePort(ABC):
    """
    Port interface for the engine's per-wallet `otherData` store.
    
    Implementations:
        - InMemoryWalletStore: Process-local store for tests and tools
        - JsonWalletStore: Local JSON file storage
    """
    
    @abstractmethod
    async def get_other_data(self) -> dict[str, Any]:
        """
        Load the wallet's otherData blob.
        
        Returns:
            Stored data, empty dict on first run.
        """
        ...
    
    @abstractmethod
    async def set_other_data(self, data: dict[str, Any]) -> None:
        """
        Replace the wallet's otherData blob.
        
        Args:
            data: Full otherData to persist
        """
        ...
