"""Storage adapters."""

from src.adapters.storage.json_wallet_store import InMemoryWalletStore, JsonWalletStore

__all__ = [
    "InMemoryWalletStore",
    "JsonWalletStore",
]
