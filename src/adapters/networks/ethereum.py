"""Ethereum network profile and default network fees."""

from src.domain.entities.currency import CurrencyInfo, Denomination
from src.domain.entities.network import AddressFamily, NetworkProfile

DEFAULT_NETWORK_FEES = {
    "default": {
        "gasLimit": {
            "regularTransaction": "21000",
            "tokenTransaction": "200000",
        },
        "gasPrice": {
            "lowFee": "1000000001",
            "standardFeeLow": "40000000001",
            "standardFeeHigh": "300000000001",
            "standardFeeLowAmount": "100000000000000000",
            "standardFeeHighAmount": "10000000000000000000",
            "highFee": "40000000001",
        },
    },
    "1983987abc9837fbabc0982347ad828": {
        "gasLimit": {
            "regularTransaction": "21002",
            "tokenTransaction": "37124",
        },
        "gasPrice": {
            "lowFee": "1000000002",
            "standardFeeLow": "40000000002",
            "standardFeeHigh": "300000000002",
            "standardFeeLowAmount": "200000000000000000",
            "standardFeeHighAmount": "20000000000000000000",
            "highFee": "40000000002",
        },
    },
    "2983987abc9837fbabc0982347ad828": {
        "gasLimit": {
            "regularTransaction": "21002",
            "tokenTransaction": "37124",
        },
    },
}

CURRENCY_INFO = CurrencyInfo(
    plugin_id="ethereum",
    currency_code="ETH",
    display_name="Ethereum",
    denominations=(
        Denomination(name="ETH", multiplier="1000000000000000000", symbol="Ξ"),
        Denomination(name="mETH", multiplier="1000000000000000", symbol="mΞ"),
    ),
    default_network_fees=DEFAULT_NETWORK_FEES,
)

PROFILE = NetworkProfile(
    currency_info=CURRENCY_INFO,
    address_family=AddressFamily.HEX_CHECKSUM,
    uri_schemes=("ethereum", "ether"),
    wallet_types=("ethereum",),
    engine_defaults={"nextNonce": "0"},
)
