"""
Payment request entities - Parsed payment URIs and encode inputs.
"""

from dataclasses import dataclass
from typing import Optional, Union

from src.domain.errors import ErrorKind, WalletPluginError


@dataclass(frozen=True)
class TokenMetadata:
    """Contract/token reference discovered from a token URI."""
    
    currency_code: str  # Token symbol (e.g., FUN)
    contract_address: str
    currency_name: str
    multiplier: str
    token_type: str = "ERC20"
    
    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "currency_code": self.currency_code,
            "contract_address": self.contract_address,
            "currency_name": self.currency_name,
            "multiplier": self.multiplier,
            "token_type": self.token_type,
        }


@dataclass(frozen=True)
class PaymentMetadata:
    """Payee label and note carried by the URI."""
    
    name: Optional[str] = None  # from "label"
    notes: Optional[str] = None  # from "message"


@dataclass(frozen=True)
class ParsedPaymentRequest:
    """Result of parsing a payment URI. Token URIs fill only `token`."""
    
    public_address: Optional[str] = None
    native_amount: Optional[str] = None
    currency_code: Optional[str] = None
    unique_identifier: Optional[str] = None
    token: Optional[TokenMetadata] = None
    metadata: Optional[PaymentMetadata] = None
    
    @property
    def is_token(self) -> bool:
        """Check if this request describes a token rather than a payment."""
        return self.token is not None
    
    def to_dict(self) -> dict:
        """Convert to dictionary, dropping empty fields."""
        result: dict = {}
        if self.public_address is not None:
            result["public_address"] = self.public_address
        if self.native_amount is not None:
            result["native_amount"] = self.native_amount
        if self.currency_code is not None:
            result["currency_code"] = self.currency_code
        if self.unique_identifier is not None:
            result["unique_identifier"] = self.unique_identifier
        if self.token is not None:
            result["token"] = self.token.to_dict()
        if self.metadata is not None:
            result["metadata"] = {"name": self.metadata.name, "notes": self.metadata.notes}
        return result


@dataclass(frozen=True)
class EncodeRequest:
    """Input for building a payment URI."""
    
    public_address: str
    native_amount: Optional[str] = None
    currency_code: Optional[str] = None  # Defaults to the plugin currency
    unique_identifier: Optional[str] = None
    label: Optional[str] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class UriResult:
    """Outcome of a URI operation without exceptions."""
    
    value: Optional[Union[ParsedPaymentRequest, str]] = None
    error: Optional[ErrorKind] = None
    error_message: Optional[str] = None
    
    @property
    def success(self) -> bool:
        return self.error is None
    
    @classmethod
    def failed(cls, exc: WalletPluginError) -> "UriResult":
        return cls(error=exc.kind, error_message=exc.message)
