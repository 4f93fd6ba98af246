"""
Currency plugin - Per-network façade over the URI codec, fee resolver and
key-management boundary.
"""

import secrets
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from src.application.services.fee_schedule import resolve_fee_schedule, validate_fee_schedule
from src.application.services.payment_uri import PaymentUriCodec
from src.domain.entities.currency import CurrencyInfo, freeze_mapping, thaw_mapping
from src.domain.entities.fee_schedule import FeeSchedule, ResolvedFeeSchedule
from src.domain.entities.network import NetworkProfile
from src.domain.entities.payment_request import (
    EncodeRequest,
    ParsedPaymentRequest,
    UriResult,
)
from src.domain.entities.wallet import WalletInfo, strip_wallet_prefix
from src.domain.errors import FeeScheduleConfigError, InvalidWalletType
from src.domain.ports.key_management_port import KeyManagementPort
from src.domain.ports.wallet_store_port import WalletStorePort
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)

PRIVATE_KEY_ENTROPY_BYTES = 32
NETWORK_FEES_KEY = "networkFees"


@dataclass(frozen=True)
class PluginContext:
    """
    Collaborators handed to operations that need randomness or storage.

    Tests inject deterministic fakes here instead of patching globals.
    """

    random_bytes: Callable[[int], bytes] = field(default=secrets.token_bytes)
    store: Optional[WalletStorePort] = None


class CurrencyPlugin:
    """
    Wallet plugin for one network.

    Built once at start-up from an immutable NetworkProfile; every method is
    safe to call concurrently.
    """

    def __init__(
        self,
        profile: NetworkProfile,
        key_manager: Optional[KeyManagementPort] = None,
        fee_schedule: Optional[FeeSchedule] = None,
    ):
        """
        Initialize the plugin.

        Args:
            profile: Network description
            key_manager: Key generation/derivation backend, if the network has one
            fee_schedule: Raw fee table overriding the currency defaults

        Raises:
            FeeScheduleConfigError: If the fee table has an incomplete default.
        """
        self.profile = profile
        self.codec = PaymentUriCodec(profile)
        self._key_manager = key_manager

        raw = fee_schedule if fee_schedule is not None else profile.currency_info.default_network_fees
        if raw:
            validate_fee_schedule(raw)
        self._fee_schedule = freeze_mapping(raw)

    @property
    def plugin_id(self) -> str:
        return self.profile.plugin_id

    @property
    def currency_info(self) -> CurrencyInfo:
        return self.profile.currency_info

    @property
    def fee_schedule(self) -> FeeSchedule:
        """Raw fee table (read-only)."""
        return self._fee_schedule

    def parse_uri(self, uri: str) -> ParsedPaymentRequest:
        """Parse a payment URI for this network."""
        return self.codec.parse(uri)

    def encode_uri(self, request: EncodeRequest) -> str:
        """Encode a payment URI for this network."""
        return self.codec.encode(request)

    def try_parse_uri(self, uri: str) -> UriResult:
        return self.codec.try_parse(uri)

    def try_encode_uri(self, request: EncodeRequest) -> UriResult:
        return self.codec.try_encode(request)

    def resolve_fees(self, network_id: str) -> ResolvedFeeSchedule:
        """Resolve this plugin's fee table for a network id."""
        if not self._fee_schedule:
            raise FeeScheduleConfigError(f"{self.plugin_id} has no network fee schedule")
        return resolve_fee_schedule(self._fee_schedule, network_id)

    @property
    def supported_wallet_types(self) -> tuple[str, ...]:
        """Wallet types this plugin can create and derive keys for."""
        if self._key_manager is None:
            return ()
        return self.profile.wallet_types

    def _check_wallet_type(self, wallet_type: str) -> tuple[KeyManagementPort, str]:
        bare_type = strip_wallet_prefix(wallet_type)
        if self._key_manager is None or bare_type not in self.profile.wallet_types:
            logger.warning(
                "unsupported_wallet_type",
                plugin_id=self.plugin_id,
                wallet_type=wallet_type,
            )
            raise InvalidWalletType(f"{self.plugin_id} does not support '{wallet_type}'")
        return self._key_manager, bare_type

    def create_private_key(
        self, wallet_type: str, context: Optional[PluginContext] = None
    ) -> dict[str, Any]:
        """
        Create key material for a new wallet.

        Args:
            wallet_type: "wallet:<type>" or "<type>"
            context: Source of random bytes

        Raises:
            InvalidWalletType: If the plugin does not handle the wallet type.
        """
        key_manager, bare_type = self._check_wallet_type(wallet_type)
        context = context or PluginContext()
        return key_manager.generate_private_key(
            context.random_bytes(PRIVATE_KEY_ENTROPY_BYTES), bare_type
        )

    def derive_public_key(self, wallet_info: WalletInfo) -> dict[str, Any]:
        """
        Derive the wallet's public address from its keys.

        Raises:
            InvalidWalletType: If the plugin does not handle the wallet type.
        """
        key_manager, _ = self._check_wallet_type(wallet_info.type)
        return key_manager.derive_public_key(wallet_info.keys)

    async def seed_engine_defaults(self, context: PluginContext) -> dict[str, Any]:
        """
        Fill missing engine `otherData` entries on first run.

        Existing values are left untouched.

        Args:
            context: Context whose store holds the wallet's otherData

        Returns:
            The otherData after seeding.
        """
        if context.store is None:
            raise ValueError("seed_engine_defaults requires a wallet store")

        other_data = await context.store.get_other_data()
        defaults: dict[str, Any] = thaw_mapping(self.profile.engine_defaults)
        if self._fee_schedule:
            defaults[NETWORK_FEES_KEY] = thaw_mapping(self._fee_schedule)

        seeded = [key for key in defaults if not other_data.get(key)]
        for key in seeded:
            other_data[key] = defaults[key]

        if seeded:
            await context.store.set_other_data(other_data)
            logger.info("seeded_engine_defaults", plugin_id=self.plugin_id, keys=seeded)
        return other_data
