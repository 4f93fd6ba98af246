"""Ripple (XRP) network profile."""

from src.domain.entities.currency import CurrencyInfo, Denomination
from src.domain.entities.network import AddressFamily, NetworkProfile, RedirectLink

CURRENCY_INFO = CurrencyInfo(
    plugin_id="ripple",
    currency_code="XRP",
    display_name="Ripple",
    denominations=(
        Denomination(name="XRP", multiplier="1000000", symbol="X"),
    ),
)

PROFILE = NetworkProfile(
    currency_info=CURRENCY_INFO,
    address_family=AddressFamily.BASE58_FIXED,
    uri_schemes=("ripple",),
    wallet_types=("ripple", "ripple-secp256k1"),
    unique_identifier_params=("dt", "tag"),
    redirect=RedirectLink(host="ripple.com", path="//send"),
    engine_defaults={"recommendedFee": "0"},
)
