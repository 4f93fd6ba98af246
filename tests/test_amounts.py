"""
Tests for decimal amount conversion.
"""

import pytest

from src.application.services.amounts import to_display_amount, to_native_amount
from src.domain.entities.currency import Denomination
from src.domain.errors import InvalidAmountError

ETH = Denomination(name="ETH", multiplier="1000000000000000000", symbol="Ξ")
EOS = Denomination(name="EOS", multiplier="10000", symbol="E")


class TestToNativeAmount:
    """Tests for display -> native conversion."""
    
    def test_scales_by_multiplier(self):
        """Test that the decimal point moves by the multiplier's zeros."""
        assert to_native_amount("1.5000", EOS) == "15000"
        assert to_native_amount("0.5", ETH) == "500000000000000000"
    
    def test_accepts_multiplier_string(self):
        """Test passing the bare multiplier instead of a denomination."""
        assert to_native_amount("2", "1000000") == "2000000"
    
    def test_truncates_toward_zero(self):
        """Test that extra fractional digits are dropped, not rounded."""
        assert to_native_amount("1.23456", EOS) == "12345"
        assert to_native_amount("0.00009", EOS) == "0"
    
    def test_zero_decimal_currency(self):
        """Test multiplier "1" leaves integer amounts unchanged."""
        assert to_native_amount("42", "1") == "42"
        assert to_native_amount("42.9", "1") == "42"
    
    def test_leading_point_and_sign(self):
        """Test optional sign and missing integer part."""
        assert to_native_amount(".5", "1000000") == "500000"
        assert to_native_amount("+3", EOS) == "30000"
        assert to_native_amount("-0", EOS) == "0"
    
    def test_large_amount_is_exact(self):
        """Test that long digit strings never lose precision."""
        amount = "123456789012345678901234567890.123456789012345678"
        assert to_native_amount(amount, ETH) == "123456789012345678901234567890123456789012345678"
    
    @pytest.mark.parametrize("amount", ["abc", "", "1.2.3", "1e5", "0x10", " ", "1,5"])
    def test_rejects_non_numeric(self, amount):
        """Test that malformed amounts raise InvalidAmountError."""
        with pytest.raises(InvalidAmountError):
            to_native_amount(amount, EOS)
    
    def test_rejects_negative(self):
        """Test that negative amounts raise InvalidAmountError."""
        with pytest.raises(InvalidAmountError):
            to_native_amount("-1.5", EOS)
    
    def test_rejects_non_string(self):
        """Test that floats are refused."""
        with pytest.raises(InvalidAmountError):
            to_native_amount(1.5, EOS)
    
    def test_rejects_bad_multiplier(self):
        """Test that a multiplier that is not a power of ten is refused."""
        with pytest.raises(ValueError):
            to_native_amount("1", "1500")


class TestToDisplayAmount:
    """Tests for native -> display conversion."""
    
    def test_whole_unit(self):
        """Test that one whole unit prints without fraction."""
        assert to_display_amount("1000000000000000000", ETH, 18) == "1"
    
    def test_fraction(self):
        """Test fractional results and trailing zero trimming."""
        assert to_display_amount("1500000000000000000", ETH, 18) == "1.5"
        assert to_display_amount("1", ETH, 18) == "0.000000000000000001"
    
    def test_precision_truncates(self):
        """Test that precision caps the fractional digits."""
        assert to_display_amount("12345", EOS, 2) == "1.23"
        assert to_display_amount("1999999999999999999", ETH, 0) == "1"
    
    def test_keep_trailing_zeros(self):
        """Test disabling zero trimming."""
        assert to_display_amount("15000", EOS, 4, trim_zeros=False) == "1.5000"
    
    def test_zero_and_negative(self):
        """Test zero and signed native amounts."""
        assert to_display_amount("0", ETH) == "0"
        assert to_display_amount("-15000", EOS, 4) == "-1.5"
    
    def test_zero_decimal_currency(self):
        """Test multiplier "1" is a pass-through."""
        assert to_display_amount("42", "1") == "42"
    
    @pytest.mark.parametrize("amount", ["1.5", "abc", "", "1e3"])
    def test_rejects_non_integer(self, amount):
        """Test that native amounts must be integers."""
        with pytest.raises(InvalidAmountError):
            to_display_amount(amount, EOS)
    
    @pytest.mark.parametrize("denomination", [EOS, ETH, Denomination(name="X", multiplier="1")])
    @pytest.mark.parametrize("value", ["0", "1", "7", "123456789", "1000000000000000001"])
    def test_display_then_native_is_exact(self, denomination, value):
        """Test to_native(to_display(v)) == v when precision covers the multiplier."""
        display = to_display_amount(value, denomination, precision=18)
        assert to_native_amount(display, denomination) == value
