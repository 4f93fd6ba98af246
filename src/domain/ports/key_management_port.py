"""
Key Management Port - Interface for chain key generation and derivation.
"""

from abc import ABC, abstractmethod
from typing import Any


class KeyManagementPort(ABC):
    """
    Port interface for private key material.
    
    The plugin core never inspects key material; it only receives and
    validates the resulting address strings.
    
    Implementations:
        - EthereumKeyManager: secp256k1 keys via eth-account
        - RippleKeyManager: ed25519 or secp256k1 family seeds via xrpl-py
    """
    
    @abstractmethod
    def generate_private_key(self, entropy: bytes, wallet_type: str) -> dict[str, Any]:
        """
        Create key material from caller-supplied entropy.
        
        Args:
            entropy: Cryptographically secure random bytes
            wallet_type: Bare wallet type, already checked by the plugin
            
        Returns:
            Key dictionary stored with the wallet (e.g. {"ethereumKey": ...}).
        """
        ...
    
    @abstractmethod
    def derive_public_key(self, keys: dict[str, Any]) -> dict[str, Any]:
        """
        Derive the public address from stored key material.
        
        Args:
            keys: Key dictionary produced by generate_private_key
            
        Returns:
            Dictionary holding the address (e.g. {"publicKey": "0x..."}).
        """
        ...
