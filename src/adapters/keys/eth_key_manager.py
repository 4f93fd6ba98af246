"""Ethereum key management using eth-account."""

from typing import Any

from eth_account import Account

from src.domain.ports.key_management_port import KeyManagementPort
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)

PRIVATE_KEY_BYTES = 32


class EthereumKeyManager(KeyManagementPort):
    """secp256k1 keys stored as hex under `ethereumKey`."""
    
    def generate_private_key(self, entropy: bytes, wallet_type: str) -> dict[str, Any]:
        """Use 32 bytes of entropy directly as the private key."""
        if len(entropy) != PRIVATE_KEY_BYTES:
            raise ValueError(f"Expected {PRIVATE_KEY_BYTES} bytes of entropy, got {len(entropy)}")
        account = Account.from_key(entropy)
        logger.debug("generated_ethereum_key")
        return {"ethereumKey": bytes(account.key).hex()}
    
    def derive_public_key(self, keys: dict[str, Any]) -> dict[str, Any]:
        """Derive the lower-case 0x address from `ethereumKey`."""
        private_key = keys["ethereumKey"]
        if private_key.startswith("0x"):
            private_key = private_key[2:]
        account = Account.from_key(bytes.fromhex(private_key))
        return {"publicKey": account.address.lower()}
