"""JSON file wallet store for local development."""

import json
from pathlib import Path
from typing import Any, Optional

import structlog

from src.domain.ports.wallet_store_port import WalletStorePort

logger = structlog.get_logger()


class JsonWalletStore(WalletStorePort):
    """Wallet store keeping each wallet's otherData in one JSON file."""

    def __init__(self, wallet_id: str, file_path: str = "data/wallet_store.json"):
        self.wallet_id = wallet_id
        self.file_path = Path(file_path)
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_file_exists()

    def _ensure_file_exists(self) -> None:
        """Create the JSON file if it doesn't exist."""
        if not self.file_path.exists():
            self._write_data({"wallets": {}})
            logger.info("created_wallet_store_file", path=str(self.file_path))

    def _read_data(self) -> dict[str, Any]:
        """Read all data from JSON file."""
        try:
            with open(self.file_path, "r") as f:
                return json.load(f)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as e:
            logger.warning(
                "wallet_store_file_unreadable",
                path=str(self.file_path),
                error=str(e),
            )
            return {}

    def _write_data(self, data: dict[str, Any]) -> None:
        """Write all data to JSON file."""
        with open(self.file_path, "w") as f:
            json.dump(data, f, indent=2)

    async def get_other_data(self) -> dict[str, Any]:
        """Load otherData for this wallet."""
        data = self._read_data()
        return data.get("wallets", {}).get(self.wallet_id, {})

    async def set_other_data(self, data: dict[str, Any]) -> None:
        """Persist otherData for this wallet."""
        stored = self._read_data()
        stored.setdefault("wallets", {})[self.wallet_id] = data
        self._write_data(stored)
        logger.debug("saved_wallet_other_data", wallet_id=self.wallet_id)


class InMemoryWalletStore(WalletStorePort):
    """Process-local wallet store."""

    def __init__(self, initial: Optional[dict[str, Any]] = None):
        self._data: dict[str, Any] = dict(initial or {})

    async def get_other_data(self) -> dict[str, Any]:
        return dict(self._data)

    async def set_other_data(self, data: dict[str, Any]) -> None:
        self._data = dict(data)
