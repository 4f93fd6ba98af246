"""
Payment URI codec.

Parses `scheme:address?key=value` payment links into ParsedPaymentRequest
values and serializes EncodeRequest values back into URIs. Network differences
(address family, scheme aliases, redirect links, memo parameters) come from the
NetworkProfile, so one codec serves every chain.
"""

import re
from typing import Optional
from urllib.parse import parse_qsl, quote, urlencode, urlsplit

from src.application.services.address_rules import (
    TOKEN_PREFIXES,
    is_valid_address,
    is_valid_hex_payload,
    split_prefixed_address,
)
from src.application.services.amounts import to_display_amount, to_native_amount
from src.domain.entities.network import AddressFamily, NetworkProfile
from src.domain.entities.payment_request import (
    EncodeRequest,
    ParsedPaymentRequest,
    PaymentMetadata,
    TokenMetadata,
    UriResult,
)
from src.domain.errors import (
    InternalErrorInvalidCurrencyCode,
    InvalidDecimalsError,
    InvalidPublicAddressError,
    InvalidTokenSymbolError,
    InvalidUriError,
    WalletPluginError,
)
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)

TOKEN_SYMBOL_MIN_LENGTH = 2
TOKEN_SYMBOL_MAX_LENGTH = 5
TOKEN_DEFAULT_DECIMALS = 18
TOKEN_MAX_DECIMALS = 18
TOKEN_DEFAULT_TYPE = "ERC20"

_DECIMALS_RE = re.compile(r"^\d+$")


def _query_params(query: str) -> dict[str, str]:
    """Decode a query string, keeping the first value of repeated keys."""
    params: dict[str, str] = {}
    for key, value in parse_qsl(query, keep_blank_values=True):
        params.setdefault(key, value)
    return params


class PaymentUriCodec:
    """
    Payment URI parser and encoder for a single network.

    Stateless apart from the immutable profile; safe to share between callers.
    """

    def __init__(self, profile: NetworkProfile):
        """
        Initialize the codec.

        Args:
            profile: Network description selected at plugin construction.
        """
        self.profile = profile

    @property
    def plugin_id(self) -> str:
        return self.profile.plugin_id

    def parse(self, uri: str) -> ParsedPaymentRequest:
        """
        Parse a payment URI.

        Args:
            uri: Payment link, redirect link or bare address

        Returns:
            ParsedPaymentRequest; token links fill only `token`.

        Raises:
            WalletPluginError: One of the URI, address, amount or token errors.
        """
        try:
            result = self._parse(uri, allow_redirect=True)
        except WalletPluginError as e:
            logger.warning(
                "payment_uri_rejected",
                plugin_id=self.plugin_id,
                kind=e.kind.value,
                error=e.message,
            )
            raise

        logger.debug(
            "payment_uri_parsed",
            plugin_id=self.plugin_id,
            is_token=result.is_token,
            has_amount=result.native_amount is not None,
        )
        return result

    def encode(self, request: EncodeRequest) -> str:
        """
        Build a payment URI.

        Args:
            request: Address and optional amount, memo and label

        Returns:
            URI string such as `ethereum:0x...?amount=1`.

        Raises:
            InvalidPublicAddressError: If the address fails validation.
            InternalErrorInvalidCurrencyCode: If the currency code is unknown.
            InvalidAmountError: If the native amount is not an integer string.
        """
        try:
            uri = self._encode(request)
        except WalletPluginError as e:
            logger.warning(
                "payment_uri_encode_rejected",
                plugin_id=self.plugin_id,
                kind=e.kind.value,
                error=e.message,
            )
            raise

        logger.debug("payment_uri_encoded", plugin_id=self.plugin_id)
        return uri

    def try_parse(self, uri: str) -> UriResult:
        """Parse without raising; the error kind is returned instead."""
        try:
            return UriResult(value=self.parse(uri))
        except WalletPluginError as e:
            return UriResult.failed(e)

    def try_encode(self, request: EncodeRequest) -> UriResult:
        """Encode without raising; the error kind is returned instead."""
        try:
            return UriResult(value=self.encode(request))
        except WalletPluginError as e:
            return UriResult.failed(e)

    def _parse(self, uri: str, allow_redirect: bool) -> ParsedPaymentRequest:
        if not isinstance(uri, str) or not uri.strip():
            raise InvalidUriError("Empty payment URI")

        parts = urlsplit(uri.strip())
        scheme = parts.scheme.lower()
        query = _query_params(parts.query)

        redirect = self.profile.redirect
        if (
            allow_redirect
            and redirect is not None
            and scheme in redirect.schemes
            and parts.netloc.lower() == redirect.host
            and parts.path == redirect.path
        ):
            target = query.get(redirect.address_param)
            if not target:
                raise InvalidUriError(
                    f"Redirect link is missing the '{redirect.address_param}' parameter"
                )
            rewritten = f"{self.profile.primary_scheme}:{target}"
            if parts.query:
                rewritten = f"{rewritten}?{parts.query}"
            return self._parse(rewritten, allow_redirect=False)

        if scheme and not self.profile.recognizes_scheme(scheme):
            raise InvalidUriError(f"Unrecognized URI scheme '{parts.scheme}'")

        # Bare addresses have no scheme; "scheme://address" puts it in netloc.
        address = parts.netloc + parts.path

        if self.profile.address_family == AddressFamily.HEX_CHECKSUM:
            prefix, payload = split_prefixed_address(address)
            if not is_valid_hex_payload(payload):
                raise InvalidPublicAddressError(f"Invalid address '{payload}'")
            if prefix in TOKEN_PREFIXES:
                return ParsedPaymentRequest(token=self._parse_token(payload, query))
            address = payload
        elif not is_valid_address(self.profile.address_family, address):
            raise InvalidPublicAddressError(f"Invalid address '{address}'")

        native_amount: Optional[str] = None
        currency_code: Optional[str] = None
        amount = query.get("amount")
        if amount:
            currency_info = self.profile.currency_info
            denomination = currency_info.canonical_denomination
            if denomination is None:
                raise InternalErrorInvalidCurrencyCode(
                    f"No denomination registered for {currency_info.currency_code}"
                )
            native_amount = to_native_amount(amount, denomination)
            currency_code = currency_info.currency_code

        unique_identifier = None
        for param in self.profile.unique_identifier_params:
            if query.get(param):
                unique_identifier = query[param]
                break

        metadata = None
        if query.get("label") or query.get("message"):
            metadata = PaymentMetadata(
                name=query.get("label") or None,
                notes=query.get("message") or None,
            )

        return ParsedPaymentRequest(
            public_address=address,
            native_amount=native_amount,
            currency_code=currency_code,
            unique_identifier=unique_identifier,
            metadata=metadata,
        )

    def _parse_token(self, contract_address: str, query: dict[str, str]) -> TokenMetadata:
        symbol = query.get("symbol", "")
        if not TOKEN_SYMBOL_MIN_LENGTH <= len(symbol) <= TOKEN_SYMBOL_MAX_LENGTH:
            raise InvalidTokenSymbolError(f"Wrong token symbol '{symbol}'")

        decimals_input = query.get("decimals") or str(TOKEN_DEFAULT_DECIMALS)
        if not _DECIMALS_RE.match(decimals_input) or int(decimals_input) > TOKEN_MAX_DECIMALS:
            raise InvalidDecimalsError(f"Wrong number of decimals '{decimals_input}'")
        decimals = int(decimals_input)

        return TokenMetadata(
            currency_code=symbol,
            contract_address=contract_address,
            currency_name=query.get("name") or symbol,
            multiplier="1" + "0" * decimals,
            token_type=(query.get("type") or TOKEN_DEFAULT_TYPE).upper(),
        )

    def _is_encodable_address(self, address: str) -> bool:
        # A "prefix-" target would be read back as a different link kind.
        if self.profile.address_family == AddressFamily.HEX_CHECKSUM:
            return isinstance(address, str) and is_valid_hex_payload(address)
        return is_valid_address(self.profile.address_family, address)

    def _encode(self, request: EncodeRequest) -> str:
        if not self._is_encodable_address(request.public_address):
            raise InvalidPublicAddressError(f"Invalid address '{request.public_address}'")

        params: list[tuple[str, str]] = []
        if request.native_amount is not None:
            currency_info = self.profile.currency_info
            currency_code = request.currency_code or currency_info.currency_code
            denomination = currency_info.get_denomination(currency_code)
            if denomination is None:
                raise InternalErrorInvalidCurrencyCode(
                    f"No denomination registered for {currency_code}"
                )
            amount = to_display_amount(
                request.native_amount,
                denomination,
                precision=self.profile.uri_amount_precision,
            )
            params.append(("amount", amount))

        if request.unique_identifier and self.profile.unique_identifier_params:
            params.append((self.profile.unique_identifier_params[0], request.unique_identifier))
        if request.label:
            params.append(("label", request.label))
        if request.message:
            params.append(("message", request.message))

        uri = f"{self.profile.primary_scheme}:{request.public_address}"
        if params:
            uri = f"{uri}?{urlencode(params, quote_via=quote)}"
        return uri


def parse_payment_uri(profile: NetworkProfile, uri: str) -> ParsedPaymentRequest:
    """Parse a payment URI for the given network."""
    return PaymentUriCodec(profile).parse(uri)


def encode_payment_uri(profile: NetworkProfile, request: EncodeRequest) -> str:
    """Encode a payment URI for the given network."""
    return PaymentUriCodec(profile).encode(request)
