"""
Plugin registry - Lookup of currency plugins by id and URI scheme.
"""

from typing import Dict
from urllib.parse import urlsplit

from src.application.plugins.currency_plugin import CurrencyPlugin
from src.domain.entities.payment_request import ParsedPaymentRequest
from src.domain.errors import InvalidUriError, PluginConflictError, PluginNotFoundError


class PluginRegistry:
    """Manages currency plugins and routes URIs to them."""

    def __init__(self):
        self._plugins: Dict[str, CurrencyPlugin] = {}
        self._schemes: Dict[str, CurrencyPlugin] = {}

    def register(self, plugin: CurrencyPlugin) -> None:
        """Register a plugin and its URI scheme aliases."""
        if plugin.plugin_id in self._plugins:
            raise PluginConflictError(f"Plugin '{plugin.plugin_id}' already registered")
        for scheme in plugin.profile.uri_schemes:
            if scheme in self._schemes:
                raise PluginConflictError(
                    f"URI scheme '{scheme}' already registered by "
                    f"'{self._schemes[scheme].plugin_id}'"
                )
        self._plugins[plugin.plugin_id] = plugin
        for scheme in plugin.profile.uri_schemes:
            self._schemes[scheme] = plugin

    def get(self, plugin_id: str) -> CurrencyPlugin:
        """Get plugin by id."""
        if plugin_id not in self._plugins:
            raise PluginNotFoundError(f"No plugin registered for '{plugin_id}'")
        return self._plugins[plugin_id]

    def for_uri(self, uri: str) -> CurrencyPlugin:
        """
        Find the plugin that owns a URI's scheme or redirect host.

        Raises:
            InvalidUriError: If no plugin recognizes the URI.
        """
        if not isinstance(uri, str) or not uri.strip():
            raise InvalidUriError("Empty payment URI")
        parts = urlsplit(uri.strip())
        scheme = parts.scheme.lower()
        if not scheme:
            raise InvalidUriError("URI has no scheme; parse bare addresses with a plugin")
        if scheme in self._schemes:
            return self._schemes[scheme]
        for plugin in self._plugins.values():
            redirect = plugin.profile.redirect
            if redirect and scheme in redirect.schemes and parts.netloc.lower() == redirect.host:
                return plugin
        raise InvalidUriError(f"No plugin recognizes URI scheme '{parts.scheme}'")

    def parse_payment_uri(self, uri: str) -> ParsedPaymentRequest:
        """Parse a URI with whichever plugin recognizes it."""
        return self.for_uri(uri).parse_uri(uri)

    def list_plugins(self) -> Dict[str, CurrencyPlugin]:
        """Return all registered plugins."""
        return self._plugins.copy()
