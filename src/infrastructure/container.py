"""
Dependency injection container for the application.
"""

from dataclasses import dataclass, replace
from typing import Any, Optional

from src.adapters.keys.eth_key_manager import EthereumKeyManager
from src.adapters.keys.ripple_key_manager import RippleKeyManager
from src.adapters.networks import NETWORK_PROFILES
from src.adapters.storage.json_wallet_store import JsonWalletStore
from src.application.plugins.currency_plugin import CurrencyPlugin, PluginContext
from src.application.plugins.registry import PluginRegistry
from src.domain.ports.key_management_port import KeyManagementPort
from src.infrastructure.config import Settings
from src.infrastructure.fee_schedule_loader import load_fee_schedule
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)

KEY_MANAGERS: dict[str, type[KeyManagementPort]] = {
    "ethereum": EthereumKeyManager,
    "ripple": RippleKeyManager,
}


@dataclass
class Container:
    """
    Dependency injection container.
    
    Provides configured plugin instances. Built once before any parse,
    encode or resolve call and read-only afterwards.
    """
    
    settings: Settings
    registry: PluginRegistry
    
    def plugin(self, plugin_id: str) -> CurrencyPlugin:
        """Get a registered plugin by id."""
        return self.registry.get(plugin_id)
    
    def wallet_context(self, wallet_id: str) -> PluginContext:
        """Context backed by the JSON wallet store for one wallet."""
        return PluginContext(
            store=JsonWalletStore(wallet_id, file_path=self.settings.wallet_store_path)
        )


_container: Optional[Container] = None


def create_container(settings: Optional[Settings] = None) -> Container:
    """
    Create and configure the dependency container.
    
    Args:
        settings: Optional settings override
        
    Returns:
        Configured Container instance.
        
    Raises:
        ValueError: If an enabled network has no built-in profile.
        FeeScheduleConfigError: If the configured fee schedule is invalid.
    """
    global _container
    
    if settings is None:
        from src.infrastructure.config import get_settings
        settings = get_settings()
    
    unknown = settings.validate_required()
    if unknown:
        raise ValueError(f"Unknown networks in ENABLED_NETWORKS: {', '.join(unknown)}")
    
    fee_override: Optional[dict[str, Any]] = None
    if settings.fee_schedule_path:
        fee_override = load_fee_schedule(settings.fee_schedule_path)
    
    registry = PluginRegistry()
    for network_id in settings.network_ids:
        profile = NETWORK_PROFILES[network_id]
        if profile.uri_amount_precision != settings.uri_amount_precision:
            profile = replace(profile, uri_amount_precision=settings.uri_amount_precision)
        
        key_manager_cls = KEY_MANAGERS.get(network_id)
        registry.register(
            CurrencyPlugin(
                profile,
                key_manager=key_manager_cls() if key_manager_cls else None,
                fee_schedule=fee_override if network_id == "ethereum" else None,
            )
        )
    
    logger.info("plugins_registered", networks=settings.network_ids)
    
    _container = Container(
        settings=settings,
        registry=registry,
    )
    
    return _container


def get_container() -> Container:
    """
    Get the current container instance.
    
    Returns:
        The configured Container.
        
    Raises:
        RuntimeError: If container not initialized.
    """
    if _container is None:
        raise RuntimeError("Container not initialized. Call create_container() first.")
    return _container


def cleanup_container() -> None:
    """Drop the container so the next create_container() starts fresh."""
    global _container
    _container = None
