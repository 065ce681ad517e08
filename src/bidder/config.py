"""
Bidder configuration using Pydantic Settings.

This module provides configuration management for the bidder adapters,
allowing environment-based configuration with type validation and defaults.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TpmnConfig(BaseSettings):
    """TPMN exchange configuration."""

    model_config = SettingsConfigDict(env_prefix="BIDDER_TPMN_")

    endpoint_url: str = Field(
        default="https://gat.tpmn.io/ortb/pbs_bidder",
        description="Destination endpoint for outgoing bid requests",
    )
    settlement_currency: str = Field(
        default="USD",
        min_length=3,
        max_length=3,
        description="Currency the exchange settles bids in",
    )

    @field_validator("settlement_currency")
    @classmethod
    def normalize_currency(cls, v: str) -> str:
        """Currency codes are upper-case ISO 4217."""
        return v.upper()


class BidderConfig(BaseSettings):
    """Root configuration combining all exchange configs."""

    model_config = SettingsConfigDict(env_prefix="BIDDER_")

    # Exchange configurations
    tpmn: TpmnConfig = Field(default_factory=TpmnConfig)

    # Global settings
    debug: bool = False
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )

    @classmethod
    def from_env(cls) -> "BidderConfig":
        """
        Load configuration from environment variables.

        Returns:
            Configured BidderConfig instance

        """
        return cls(tpmn=TpmnConfig())


def configure_logging(settings: BidderConfig) -> None:
    """Apply the configured log level to the bidder package loggers."""
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level)
    logging.getLogger("src.bidder").setLevel(level)


# Global config instance
config = BidderConfig.from_env()
