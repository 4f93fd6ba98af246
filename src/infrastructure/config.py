"""
Application configuration using Pydantic Settings.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

KNOWN_NETWORKS = ("ethereum", "ripple", "eos")


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    All settings can be overridden via environment variables.
    """
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Output logs as JSON (for production)",
    )
    
    # Plugin Configuration
    enabled_networks: str = Field(
        default="ethereum,ripple,eos",
        description="Comma-separated plugin ids to register",
    )
    uri_amount_precision: int = Field(
        default=18,
        ge=0,
        description="Maximum fractional digits written into payment URI amounts",
    )
    
    # Fee Schedule Configuration
    fee_schedule_path: Optional[str] = Field(
        default=None,
        description="JSON file overriding the built-in Ethereum network fees",
    )
    
    # Storage Configuration
    wallet_store_path: str = Field(
        default="data/wallet_store.json",
        description="Path to JSON wallet store (for local development)",
    )
    
    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()
    
    @property
    def network_ids(self) -> list[str]:
        """Enabled plugin ids in configuration order."""
        return [
            network.strip().lower()
            for network in self.enabled_networks.split(",")
            if network.strip()
        ]
    
    def validate_required(self) -> list[str]:
        """
        Validate the enabled network list.
        
        Returns:
            List of configured networks that have no built-in profile.
        """
        return [network for network in self.network_ids if network not in KNOWN_NETWORKS]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.
    
    Returns:
        Settings instance loaded from environment.
    """
    return Settings()
