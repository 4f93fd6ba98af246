"""
Tests for domain entities.
"""

import pytest

from src.adapters.networks import NETWORK_PROFILES, ethereum, ripple
from src.domain.entities.currency import CurrencyInfo, Denomination
from src.domain.entities.fee_schedule import FeeOption, FeeParameters, ResolvedFeeSchedule
from src.domain.entities.network import AddressFamily, NetworkProfile
from src.domain.entities.payment_request import (
    ParsedPaymentRequest,
    PaymentMetadata,
    TokenMetadata,
    UriResult,
)
from src.domain.entities.wallet import WalletInfo
from src.domain.errors import ErrorKind, InvalidAmountError, InvalidUriError


class TestDenomination:
    """Tests for Denomination entity."""
    
    def test_decimals(self):
        """Test decimals derived from the multiplier."""
        assert Denomination(name="ETH", multiplier="1000000000000000000").decimals == 18
        assert Denomination(name="UNIT", multiplier="1").decimals == 0
    
    def test_rejects_non_power_of_ten(self):
        """Test multiplier validation."""
        with pytest.raises(ValueError):
            Denomination(name="BAD", multiplier="2500")


class TestCurrencyInfo:
    """Tests for CurrencyInfo entity."""
    
    def test_canonical_denomination(self):
        """Test that the canonical unit is named after the currency code."""
        denomination = ethereum.CURRENCY_INFO.canonical_denomination
        assert denomination.name == "ETH"
        assert ethereum.CURRENCY_INFO.get_denomination("mETH").decimals == 15
        assert ethereum.CURRENCY_INFO.get_denomination("gwei") is None
    
    def test_missing_canonical_denomination(self):
        """Test a currency without a unit for its own code."""
        info = CurrencyInfo(
            plugin_id="test",
            currency_code="TST",
            display_name="Test",
            denominations=(Denomination(name="mTST", multiplier="1000"),),
        )
        assert info.canonical_denomination is None
    
    def test_network_fees_read_only(self):
        """Test that default network fees are frozen."""
        with pytest.raises(TypeError):
            ethereum.CURRENCY_INFO.default_network_fees["default"] = {}


class TestNetworkProfile:
    """Tests for NetworkProfile entity."""
    
    def test_schemes(self):
        """Test scheme aliases."""
        assert ethereum.PROFILE.primary_scheme == "ethereum"
        assert ethereum.PROFILE.recognizes_scheme("ETHER")
        assert not ethereum.PROFILE.recognizes_scheme("ripple")
    
    def test_requires_scheme(self):
        """Test that a profile needs at least one scheme."""
        with pytest.raises(ValueError):
            NetworkProfile(
                currency_info=ripple.CURRENCY_INFO,
                address_family=AddressFamily.BASE58_FIXED,
                uri_schemes=(),
                wallet_types=("ripple",),
            )
    
    def test_builtin_profiles(self):
        """Test the built-in profile table."""
        assert set(NETWORK_PROFILES) == {"ethereum", "ripple", "eos"}
        for plugin_id, profile in NETWORK_PROFILES.items():
            assert profile.plugin_id == plugin_id


class TestParsedPaymentRequest:
    """Tests for ParsedPaymentRequest entity."""
    
    def test_to_dict_drops_empty_fields(self):
        """Test dictionary conversion."""
        request = ParsedPaymentRequest(
            public_address="abcdefghijkl",
            metadata=PaymentMetadata(name="Shop"),
        )
        assert request.to_dict() == {
            "public_address": "abcdefghijkl",
            "metadata": {"name": "Shop", "notes": None},
        }
        assert request.is_token is False
    
    def test_token_request(self):
        """Test a token-only request."""
        token = TokenMetadata(
            currency_code="FUN",
            contract_address="0x419d0d8bdd9af5e606ae2232ed285aff190e711b",
            currency_name="FunFair",
            multiplier="100000000",
        )
        request = ParsedPaymentRequest(token=token)
        
        assert request.is_token is True
        assert request.to_dict()["token"]["token_type"] == "ERC20"


class TestUriResult:
    """Tests for UriResult entity."""
    
    def test_failed(self):
        """Test building a failure from an exception."""
        result = UriResult.failed(InvalidUriError("bad scheme"))
        
        assert result.success is False
        assert result.error == ErrorKind.INVALID_URI
        assert result.error_message == "bad scheme"
    
    def test_default_message(self):
        """Test that errors default their message to the kind."""
        assert InvalidAmountError().message == "InvalidAmountError"


class TestFeeEntities:
    """Tests for fee schedule entities."""
    
    def test_max_fee(self):
        """Test fee upper bound."""
        params = FeeParameters(gas_price="40000000001", gas_limit="21000")
        assert params.max_fee == "840000000021000"
        assert params.fee_option == FeeOption.STANDARD
    
    def test_resolved_to_dict(self):
        """Test raw table shape."""
        resolved = ResolvedFeeSchedule(gas_limit={"a": "1"}, gas_price={"b": "2"})
        assert resolved.to_dict() == {"gasLimit": {"a": "1"}, "gasPrice": {"b": "2"}}


class TestWalletInfo:
    """Tests for WalletInfo entity."""
    
    def test_bare_type(self):
        """Test wallet type prefix stripping."""
        assert WalletInfo(type="wallet:ethereum").bare_type == "ethereum"
        assert WalletInfo(type="ripple").bare_type == "ripple"
