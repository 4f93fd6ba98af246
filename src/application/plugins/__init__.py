"""Currency plugins."""

from src.application.plugins.currency_plugin import CurrencyPlugin, PluginContext
from src.application.plugins.registry import PluginRegistry

__all__ = ["CurrencyPlugin", "PluginContext", "PluginRegistry"]
