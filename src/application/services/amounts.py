"""
Decimal amount conversion between display units and native integer units.

All scaling is exact: amounts are parsed as decimal strings and shifted by the
number of zeros in the denomination multiplier. Binary floating point is never
involved.
"""

import re
from decimal import ROUND_DOWN, Decimal, localcontext
from typing import Union

from src.domain.entities.currency import Denomination
from src.domain.errors import InvalidAmountError

_DISPLAY_AMOUNT_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)$")
_NATIVE_AMOUNT_RE = re.compile(r"^[+-]?\d+$")

DenominationLike = Union[Denomination, str]


def _shift_of(denomination: DenominationLike) -> int:
    if isinstance(denomination, Denomination):
        return denomination.decimals
    # Validates the bare multiplier the same way a table entry would be.
    return Denomination(name="", multiplier=denomination).decimals


def _format_integer(value: Decimal) -> str:
    if value == 0:
        return "0"
    return format(value, "f")


def to_native_amount(display_amount: str, denomination: DenominationLike) -> str:
    """
    Convert a display amount to a native integer string.
    
    The product is truncated toward zero.
    
    Args:
        display_amount: Non-negative decimal string (e.g. "1.5000")
        denomination: Denomination or its multiplier string
        
    Returns:
        Native amount as a string of digits.
        
    Raises:
        InvalidAmountError: If the amount is not a non-negative decimal.
    """
    if not isinstance(display_amount, str):
        raise InvalidAmountError(f"Amount must be a decimal string, got {display_amount!r}")
    amount = display_amount.strip()
    if not _DISPLAY_AMOUNT_RE.match(amount):
        raise InvalidAmountError(f"Invalid amount: {display_amount!r}")
    
    value = Decimal(amount)
    if value < 0:
        raise InvalidAmountError(f"Negative amount: {display_amount!r}")
    
    shift = _shift_of(denomination)
    with localcontext() as ctx:
        ctx.prec = len(value.as_tuple().digits) + shift + 1
        native = value.scaleb(shift).to_integral_value(rounding=ROUND_DOWN)
    return _format_integer(native)


def to_display_amount(
    native_amount: str,
    denomination: DenominationLike,
    precision: int = 18,
    trim_zeros: bool = True,
) -> str:
    """
    Convert a native integer amount to a display decimal string.
    
    Args:
        native_amount: Integer string, optionally signed
        denomination: Denomination or its multiplier string
        precision: Maximum fractional digits kept (extra digits are truncated)
        trim_zeros: Drop trailing fractional zeros and a dangling point
        
    Returns:
        Display amount (e.g. "1" for 10**18 wei in ETH).
        
    Raises:
        InvalidAmountError: If the native amount is not an integer string.
    """
    if not isinstance(native_amount, str) or not _NATIVE_AMOUNT_RE.match(native_amount.strip()):
        raise InvalidAmountError(f"Invalid native amount: {native_amount!r}")
    if precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}")
    
    value = Decimal(native_amount.strip())
    shift = _shift_of(denomination)
    
    with localcontext() as ctx:
        ctx.prec = len(native_amount) + precision + 1
        quantum = Decimal(1).scaleb(-precision)
        display = value.scaleb(-shift).quantize(quantum, rounding=ROUND_DOWN)
    
    text = format(display, "f")
    if trim_zeros and "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", "+0", ""):
        return "0"
    return text
