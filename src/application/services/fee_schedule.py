"""
Network fee schedule resolution and fee parameter selection.
"""

import re
from typing import Any, Mapping, Optional

from src.domain.entities.fee_schedule import (
    DEFAULT_NETWORK,
    GAS_LIMIT,
    GAS_PRICE,
    REQUIRED_GAS_LIMIT_KEYS,
    REQUIRED_GAS_PRICE_KEYS,
    FeeOption,
    FeeParameters,
    FeeSchedule,
    ResolvedFeeSchedule,
)
from src.domain.errors import FeeScheduleConfigError, InvalidAmountError
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)

_INTEGER_RE = re.compile(r"^[0-9]+$")

_REQUIRED_KEYS = {
    GAS_LIMIT: REQUIRED_GAS_LIMIT_KEYS,
    GAS_PRICE: REQUIRED_GAS_PRICE_KEYS,
}


def _is_integer_string(value: Any) -> bool:
    return isinstance(value, str) and _INTEGER_RE.match(value) is not None


def validate_fee_schedule(raw: Mapping[str, Any]) -> None:
    """
    Check a raw fee schedule at load time.

    The "default" entry must define every gas limit and gas price key; other
    entries may be partial. All values must be non-negative integer strings.

    Args:
        raw: Raw per-network fee table

    Raises:
        FeeScheduleConfigError: If the table cannot be resolved safely.
    """
    if not isinstance(raw, Mapping):
        raise FeeScheduleConfigError("Fee schedule must be a mapping of network ids")

    default = raw.get(DEFAULT_NETWORK)
    if not isinstance(default, Mapping):
        raise FeeScheduleConfigError(
            "Fee schedule has no 'default' entry", missing=[DEFAULT_NETWORK]
        )

    missing = [
        f"{DEFAULT_NETWORK}.{section}.{key}"
        for section, keys in _REQUIRED_KEYS.items()
        for key in keys
        if not isinstance(default.get(section), Mapping) or key not in default[section]
    ]
    if missing:
        raise FeeScheduleConfigError(
            f"Default fee schedule is incomplete: {', '.join(missing)}", missing=missing
        )

    for network_id, entry in raw.items():
        if not isinstance(entry, Mapping):
            raise FeeScheduleConfigError(f"Fee entry for '{network_id}' must be a mapping")
        for section in (GAS_LIMIT, GAS_PRICE):
            values = entry.get(section, {})
            if not isinstance(values, Mapping):
                raise FeeScheduleConfigError(f"'{network_id}.{section}' must be a mapping")
            bad = [key for key, value in values.items() if not _is_integer_string(value)]
            if bad:
                raise FeeScheduleConfigError(
                    f"'{network_id}.{section}' has non-integer values: {', '.join(bad)}"
                )


def resolve_fee_schedule(raw: FeeSchedule, network_id: str) -> ResolvedFeeSchedule:
    """
    Produce a fully populated fee schedule for a network.

    Unknown networks get the "default" entry verbatim. Known networks keep
    their own keys and inherit the missing ones from "default".

    Args:
        raw: Raw fee table, validated with validate_fee_schedule at load time
        network_id: Network identifier (e.g. a chain genesis hash)

    Returns:
        ResolvedFeeSchedule owned by the caller.
    """
    default = raw.get(DEFAULT_NETWORK)
    if default is None:
        raise FeeScheduleConfigError(
            "Fee schedule has no 'default' entry", missing=[DEFAULT_NETWORK]
        )

    entry = raw.get(network_id)
    if entry is None:
        logger.debug("fee_schedule_network_fallback", network_id=network_id)
        return ResolvedFeeSchedule(
            gas_limit=dict(default.get(GAS_LIMIT, {})),
            gas_price=dict(default.get(GAS_PRICE, {})),
            network_id=DEFAULT_NETWORK,
        )

    return ResolvedFeeSchedule(
        gas_limit={**default.get(GAS_LIMIT, {}), **entry.get(GAS_LIMIT, {})},
        gas_price={**default.get(GAS_PRICE, {}), **entry.get(GAS_PRICE, {})},
        network_id=network_id,
    )


def _standard_gas_price(gas_price: Mapping[str, str], native_amount: int) -> int:
    """Scale the standard tier linearly with the amount being sent."""
    fee_low = int(gas_price["standardFeeLow"])
    fee_high = int(gas_price["standardFeeHigh"])
    amount_low = int(gas_price["standardFeeLowAmount"])
    amount_high = int(gas_price["standardFeeHighAmount"])

    if native_amount < amount_low:
        return fee_low
    if native_amount > amount_high or amount_high == amount_low:
        return fee_high

    return fee_low + (native_amount - amount_low) * (fee_high - fee_low) // (
        amount_high - amount_low
    )


def select_fee_parameters(
    schedule: ResolvedFeeSchedule,
    fee_option: FeeOption = FeeOption.STANDARD,
    native_amount: str = "0",
    is_token: bool = False,
    custom: Optional[Mapping[str, str]] = None,
) -> FeeParameters:
    """
    Choose gas price and gas limit for one spend.

    Args:
        schedule: Resolved schedule for the wallet's network
        fee_option: Requested tier
        native_amount: Amount being sent, in native units
        is_token: Token transfers use the token gas limit
        custom: {"gasPrice": ..., "gasLimit": ...} for FeeOption.CUSTOM

    Returns:
        FeeParameters with integer-string gas price and limit.

    Raises:
        InvalidAmountError: If native_amount is not a non-negative integer.
        ValueError: If a custom fee is requested without a gas price.
    """
    if not _is_integer_string(native_amount):
        raise InvalidAmountError(f"Invalid native amount: {native_amount!r}")

    fee_option = FeeOption(fee_option)
    gas_limit = schedule.gas_limit["tokenTransaction" if is_token else "regularTransaction"]

    if fee_option == FeeOption.LOW:
        gas_price = schedule.gas_price["lowFee"]
    elif fee_option == FeeOption.HIGH:
        gas_price = schedule.gas_price["highFee"]
    elif fee_option == FeeOption.CUSTOM:
        if not custom or not _is_integer_string(custom.get("gasPrice")):
            raise ValueError("Custom fee requires an integer gasPrice")
        gas_price = custom["gasPrice"]
        if _is_integer_string(custom.get("gasLimit")):
            gas_limit = custom["gasLimit"]
    else:
        gas_price = str(_standard_gas_price(schedule.gas_price, int(native_amount)))

    logger.debug(
        "fee_parameters_selected",
        network_id=schedule.network_id,
        fee_option=fee_option.value,
        gas_price=gas_price,
        gas_limit=gas_limit,
    )
    return FeeParameters(
        gas_price=gas_price,
        gas_limit=gas_limit,
        fee_option=fee_option,
        custom=dict(custom) if custom else None,
    )
