"""
Shared test fixtures.
"""

import logging

import pytest
import structlog

from src.adapters.keys.eth_key_manager import EthereumKeyManager
from src.adapters.keys.ripple_key_manager import RippleKeyManager
from src.adapters.networks import eos, ethereum, ripple
from src.application.plugins.currency_plugin import CurrencyPlugin


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Render log events without printing them; capture_logs still sees them."""
    structlog.configure(
        processors=[structlog.processors.KeyValueRenderer()],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
        logger_factory=structlog.ReturnLoggerFactory(),
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def eth_plugin() -> CurrencyPlugin:
    return CurrencyPlugin(ethereum.PROFILE, key_manager=EthereumKeyManager())


@pytest.fixture
def xrp_plugin() -> CurrencyPlugin:
    return CurrencyPlugin(ripple.PROFILE, key_manager=RippleKeyManager())


@pytest.fixture
def eos_plugin() -> CurrencyPlugin:
    return CurrencyPlugin(eos.PROFILE)
