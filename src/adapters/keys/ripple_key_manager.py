"""Ripple key management using xrpl-py."""

from typing import Any

from xrpl import CryptoAlgorithm
from xrpl.core import addresscodec, keypairs

from src.domain.ports.key_management_port import KeyManagementPort
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)

SEED_ENTROPY_BYTES = 16

ALGORITHMS = {
    "ripple": CryptoAlgorithm.ED25519,
    "ripple-secp256k1": CryptoAlgorithm.SECP256K1,
}


class RippleKeyManager(KeyManagementPort):
    """Family seeds stored as base58 strings under `rippleKey`."""
    
    def generate_private_key(self, entropy: bytes, wallet_type: str) -> dict[str, Any]:
        """
        Encode the first 16 bytes of entropy as a family seed.
        
        `ripple` wallets get ed25519 seeds ("sEd..."), `ripple-secp256k1`
        wallets get secp256k1 seeds.
        """
        if len(entropy) < SEED_ENTROPY_BYTES:
            raise ValueError(
                f"Expected at least {SEED_ENTROPY_BYTES} bytes of entropy, got {len(entropy)}"
            )
        algorithm = ALGORITHMS[wallet_type]
        seed = addresscodec.encode_seed(entropy[:SEED_ENTROPY_BYTES], algorithm)
        logger.debug("generated_ripple_seed", algorithm=algorithm.value)
        return {"rippleKey": seed}
    
    def derive_public_key(self, keys: dict[str, Any]) -> dict[str, Any]:
        """Derive the classic r-address; the seed encodes its own algorithm."""
        public_key, _ = keypairs.derive_keypair(keys["rippleKey"])
        return {"displayAddress": keypairs.derive_classic_address(public_key)}
