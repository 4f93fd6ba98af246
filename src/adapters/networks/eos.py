"""EOS network profile."""

from src.domain.entities.currency import CurrencyInfo, Denomination
from src.domain.entities.network import AddressFamily, NetworkProfile

CURRENCY_INFO = CurrencyInfo(
    plugin_id="eos",
    currency_code="EOS",
    display_name="EOS",
    denominations=(
        Denomination(name="EOS", multiplier="10000", symbol="E"),
    ),
)

PROFILE = NetworkProfile(
    currency_info=CURRENCY_INFO,
    address_family=AddressFamily.ACCOUNT_NAME,
    uri_schemes=("eos",),
    # No EOS key library is wired in, so no wallet types are offered.
    wallet_types=(),
    unique_identifier_params=("tag",),
)
