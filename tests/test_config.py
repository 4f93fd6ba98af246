"""
Tests for settings, the fee schedule loader, the container and the CLI.
"""

import copy
import json
from dataclasses import fields

import pytest

import src.main as cli
from src.adapters.networks.ethereum import DEFAULT_NETWORK_FEES
from src.domain.entities.payment_request import EncodeRequest
from src.domain.errors import FeeScheduleConfigError
from src.infrastructure.config import Settings
from src.infrastructure.container import (
    Container,
    cleanup_container,
    create_container,
    get_container,
)
from src.infrastructure.fee_schedule_loader import load_fee_schedule

ETH_ADDRESS = "0x89205A3A3b2A69De6Dbf7f01ED13B2108B2c43e7"


def make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


def write_json(path, data) -> str:
    path.write_text(json.dumps(data))
    return str(path)


class TestSettings:
    """Tests for Settings."""
    
    def test_defaults(self):
        """Test the default network list."""
        settings = make_settings()
        assert settings.network_ids == ["ethereum", "ripple", "eos"]
        assert settings.validate_required() == []
    
    def test_network_list_normalized(self):
        """Test whitespace and case handling."""
        settings = make_settings(enabled_networks=" Ripple, ,EOS ")
        assert settings.network_ids == ["ripple", "eos"]
    
    def test_unknown_network_reported(self):
        """Test that unknown networks are reported."""
        settings = make_settings(enabled_networks="ethereum,bitcoin")
        assert settings.validate_required() == ["bitcoin"]
    
    def test_log_level_upper_cased(self):
        """Test log level normalization."""
        assert make_settings(log_level="debug").log_level == "DEBUG"
    
    def test_env_override(self, monkeypatch):
        """Test that environment variables are read."""
        monkeypatch.setenv("URI_AMOUNT_PRECISION", "6")
        assert make_settings().uri_amount_precision == 6


class TestLoadFeeSchedule:
    """Tests for the JSON fee schedule loader."""
    
    def test_loads_valid_file(self, tmp_path):
        """Test loading a complete schedule."""
        path = write_json(tmp_path / "fees.json", DEFAULT_NETWORK_FEES)
        assert load_fee_schedule(path) == DEFAULT_NETWORK_FEES
    
    def test_missing_file(self, tmp_path):
        """Test a missing file."""
        with pytest.raises(FeeScheduleConfigError):
            load_fee_schedule(str(tmp_path / "absent.json"))
    
    def test_invalid_json(self, tmp_path):
        """Test a file that is not JSON."""
        path = tmp_path / "fees.json"
        path.write_text("{not json")
        with pytest.raises(FeeScheduleConfigError):
            load_fee_schedule(str(path))
    
    def test_incomplete_default(self, tmp_path):
        """Test that missing default keys are listed."""
        raw = copy.deepcopy(DEFAULT_NETWORK_FEES)
        del raw["default"]["gasPrice"]["lowFee"]
        path = write_json(tmp_path / "fees.json", raw)
        
        with pytest.raises(FeeScheduleConfigError) as exc_info:
            load_fee_schedule(path)
        assert exc_info.value.missing == ["default.gasPrice.lowFee"]


class TestContainer:
    """Tests for container wiring."""
    
    @pytest.fixture(autouse=True)
    def reset(self):
        yield
        cleanup_container()
    
    def test_registers_enabled_networks(self):
        """Test that only enabled networks are registered."""
        container = create_container(make_settings(enabled_networks="ripple,eos"))
        
        assert set(container.registry.list_plugins()) == {"ripple", "eos"}
        assert get_container() is container
    
    def test_container_holds_settings_and_registry(self):
        """Test that the container carries only its wired collaborators."""
        settings = make_settings(enabled_networks="eos")
        container = create_container(settings)
        
        assert [f.name for f in fields(Container)] == ["settings", "registry"]
        assert container.settings is settings
    
    def test_unknown_network(self):
        """Test that unknown networks fail start-up."""
        with pytest.raises(ValueError):
            create_container(make_settings(enabled_networks="bitcoin"))
    
    def test_get_container_before_create(self):
        """Test access before initialization."""
        with pytest.raises(RuntimeError):
            get_container()
    
    def test_fee_schedule_override(self, tmp_path):
        """Test that the configured fee file replaces the built-in table."""
        raw = copy.deepcopy(DEFAULT_NETWORK_FEES)
        raw["default"]["gasPrice"]["highFee"] = "99"
        path = write_json(tmp_path / "fees.json", raw)
        
        container = create_container(make_settings(fee_schedule_path=path))
        resolved = container.plugin("ethereum").resolve_fees("unknown")
        
        assert resolved.gas_price["highFee"] == "99"
    
    def test_amount_precision(self):
        """Test that URI amounts are cut to the configured precision."""
        container = create_container(make_settings(uri_amount_precision=2))
        uri = container.plugin("ethereum").encode_uri(
            EncodeRequest(public_address=ETH_ADDRESS, native_amount="1234500000000000000")
        )
        assert uri == f"ethereum:{ETH_ADDRESS}?amount=1.23"
    
    def test_ethereum_has_key_manager(self):
        """Test that ethereum is wired with key management."""
        container = create_container(make_settings())
        keys = container.plugin("ethereum").create_private_key("wallet:ethereum")
        assert "ethereumKey" in keys


class TestCli:
    """Tests for the command line entry point."""
    
    @pytest.fixture(autouse=True)
    def settings(self, monkeypatch, tmp_path):
        settings = make_settings(wallet_store_path=str(tmp_path / "store.json"))
        monkeypatch.setattr(cli, "get_settings", lambda: settings)
        monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)
        return settings
    
    def run(self, capsys, *argv):
        code = cli.main(list(argv))
        return code, json.loads(capsys.readouterr().out)
    
    def test_parse_uri(self, capsys):
        """Test parsing through the registry."""
        code, output = self.run(capsys, "parse-uri", "eos:abcdefghijkl?amount=1.5&tag=42")
        
        assert code == 0
        assert output == {
            "public_address": "abcdefghijkl",
            "native_amount": "15000",
            "currency_code": "EOS",
            "unique_identifier": "42",
        }
    
    def test_parse_bare_address_with_plugin(self, capsys):
        """Test bare address parsing with an explicit plugin."""
        code, output = self.run(
            capsys, "parse-uri", "rf1BiGeXwwQoi8Z2ueFYTEXSwuJYfV2Jpn", "--plugin", "ripple"
        )
        assert code == 0
        assert output == {"public_address": "rf1BiGeXwwQoi8Z2ueFYTEXSwuJYfV2Jpn"}
    
    def test_parse_error(self, capsys):
        """Test that plugin errors exit with code 1."""
        code, output = self.run(capsys, "parse-uri", "bitcoin:abc")
        
        assert code == 1
        assert output["error"] == "InvalidUriError"
    
    def test_encode_uri(self, capsys):
        """Test URI encoding."""
        code, output = self.run(
            capsys,
            "encode-uri",
            "--plugin", "ethereum",
            "--address", ETH_ADDRESS,
            "--amount", "1000000000000000000",
        )
        assert code == 0
        assert output == {"uri": f"ethereum:{ETH_ADDRESS}?amount=1"}
    
    def test_resolve_fees(self, capsys):
        """Test fee resolution with tier selection."""
        code, output = self.run(capsys, "resolve-fees", "unknown", "--fee-option", "low")
        
        assert code == 0
        assert output["network_id"] == "default"
        assert output["selected"] == {
            "gasPrice": "1000000001",
            "gasLimit": "21000",
            "maxFee": "21000021000",
        }
    
    def test_unknown_plugin(self, capsys):
        """Test that registry errors exit with code 2."""
        code, output = self.run(capsys, "resolve-fees", "default", "--plugin", "bitcoin")
        
        assert code == 2
        assert output["error"] == "PluginNotFoundError"
    
    def test_seed_wallet(self, capsys, settings):
        """Test seeding through the JSON store."""
        code, output = self.run(capsys, "seed-wallet", "wallet-1", "--plugin", "ethereum")
        
        assert code == 0
        assert output["nextNonce"] == "0"
        stored = json.loads(open(settings.wallet_store_path).read())
        assert stored["wallets"]["wallet-1"]["nextNonce"] == "0"
