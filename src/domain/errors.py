"""
Domain errors - Caller-visible failure kinds for URI, amount and key handling.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Failure kinds surfaced to the wallet UI."""
    
    INVALID_URI = "InvalidUriError"
    INVALID_PUBLIC_ADDRESS = "InvalidPublicAddressError"
    INVALID_AMOUNT = "InvalidAmountError"
    INVALID_TOKEN_SYMBOL = "InvalidTokenSymbolError"
    INVALID_DECIMALS = "InvalidDecimalsError"
    INVALID_CURRENCY_CODE = "InternalErrorInvalidCurrencyCode"
    INVALID_WALLET_TYPE = "InvalidWalletType"


class WalletPluginError(Exception):
    """Base exception for plugin operations. Never retried: same input, same error."""
    
    kind: ErrorKind
    
    def __init__(self, message: Optional[str] = None):
        self.message = message or self.kind.value
        super().__init__(self.message)


class InvalidUriError(WalletPluginError):
    """Unrecognized scheme or malformed redirect link."""
    
    kind = ErrorKind.INVALID_URI


class InvalidPublicAddressError(WalletPluginError):
    """Address fails the network's validator."""
    
    kind = ErrorKind.INVALID_PUBLIC_ADDRESS


class InvalidAmountError(WalletPluginError):
    """Amount is not a non-negative decimal."""
    
    kind = ErrorKind.INVALID_AMOUNT


class InvalidTokenSymbolError(WalletPluginError):
    """Token symbol missing or outside 2-5 characters."""
    
    kind = ErrorKind.INVALID_TOKEN_SYMBOL


class InvalidDecimalsError(WalletPluginError):
    """Token decimals not an integer in [0, 18]."""
    
    kind = ErrorKind.INVALID_DECIMALS


class InternalErrorInvalidCurrencyCode(WalletPluginError):
    """Denomination lookup missed for a code that should be registered."""
    
    kind = ErrorKind.INVALID_CURRENCY_CODE


class InvalidWalletType(WalletPluginError):
    """Requested wallet type is not supported by the plugin."""
    
    kind = ErrorKind.INVALID_WALLET_TYPE


class FeeScheduleConfigError(ValueError):
    """Raw fee schedule is unusable (missing or incomplete default entry)."""
    
    def __init__(self, message: str, missing: Optional[list[str]] = None):
        self.missing = missing or []
        super().__init__(message)


class PluginRegistryError(Exception):
    """Base exception for plugin registry errors."""


class PluginNotFoundError(PluginRegistryError, LookupError):
    """Raised when no plugin is registered for an id or URI scheme."""


class PluginConflictError(PluginRegistryError):
    """Raised when a plugin id or URI scheme is registered twice."""
