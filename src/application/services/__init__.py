"""Application services - Amount conversion, address rules, URI codec, fees."""

from src.application.services.address_rules import is_valid_address
from src.application.services.amounts import to_display_amount, to_native_amount
from src.application.services.fee_schedule import (
    resolve_fee_schedule,
    select_fee_parameters,
    validate_fee_schedule,
)
from src.application.services.payment_uri import (
    PaymentUriCodec,
    encode_payment_uri,
    parse_payment_uri,
)

__all__ = [
    "is_valid_address",
    "to_display_amount",
    "to_native_amount",
    "resolve_fee_schedule",
    "select_fee_parameters",
    "validate_fee_schedule",
    "PaymentUriCodec",
    "encode_payment_uri",
    "parse_payment_uri",
]
