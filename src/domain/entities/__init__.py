"""
Domain entities - Core wallet plugin objects.
"""

from src.domain.entities.currency import CurrencyInfo, Denomination
from src.domain.entities.fee_schedule import (
    FeeOption,
    FeeParameters,
    FeeSchedule,
    ResolvedFeeSchedule,
)
from src.domain.entities.network import AddressFamily, NetworkProfile, RedirectLink
from src.domain.entities.payment_request import (
    EncodeRequest,
    ParsedPaymentRequest,
    PaymentMetadata,
    TokenMetadata,
    UriResult,
)
from src.domain.entities.wallet import WalletInfo

__all__ = [
    "CurrencyInfo",
    "Denomination",
    "FeeOption",
    "FeeParameters",
    "FeeSchedule",
    "ResolvedFeeSchedule",
    "AddressFamily",
    "NetworkProfile",
    "RedirectLink",
    "EncodeRequest",
    "ParsedPaymentRequest",
    "PaymentMetadata",
    "TokenMetadata",
    "UriResult",
    "WalletInfo",
]
