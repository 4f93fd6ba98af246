"""
Infrastructure layer - Settings, structured logging and start-up wiring.

The container is imported from src.infrastructure.container directly; it
pulls in every adapter and would make this package import cyclic.
"""

from src.infrastructure.config import KNOWN_NETWORKS, Settings, get_settings
from src.infrastructure.logging import get_logger, setup_logging

__all__ = ["KNOWN_NETWORKS", "Settings", "get_settings", "get_logger", "setup_logging"]
