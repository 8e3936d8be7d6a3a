"""
Application settings.

Loads configuration from environment variables using pydantic-settings.
"""

import re

from loguru import logger
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from monadpay.config.constants import (
    BLOCKCHAIN_RPC_TIMEOUT,
    DEEP_LINK_SCHEME,
    DEFAULT_CHAIN_ID,
    DEFAULT_WEB_BASE_URL,
    RECEIPT_POLL_LATENCY,
    RECEIPT_TIMEOUT,
)


ADDRESS_PATTERN = re.compile(r"^0x[a-fA-F0-9]{40}$")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Network
    rpc_url: str = "https://testnet-rpc.monad.xyz"
    chain_id: int = Field(
        default=DEFAULT_CHAIN_ID, gt=0, description="Default chain id"
    )

    # Payment links
    deep_link_scheme: str = DEEP_LINK_SCHEME
    web_base_url: str = DEFAULT_WEB_BASE_URL

    # Contracts
    processor_contract_address: str = Field(
        default="0x71065d406B5Ee090A98AE00ef197a23Bf9cD1b64",
        description="MonadPay payment processor contract",
    )
    usdc_token_address: str = "0xd9C73AF78191Be2C3088FB8755a3374779E3c727"
    usdt_token_address: str = "0x9487B62cE77FCA8BBa0152642E085FF716e1e876"

    # Wallet
    wallet_private_key: str | None = None

    # Blockchain timeouts
    rpc_timeout: int = Field(default=BLOCKCHAIN_RPC_TIMEOUT, ge=1)
    receipt_timeout: float = Field(default=RECEIPT_TIMEOUT, gt=0)
    receipt_poll_latency: float = Field(default=RECEIPT_POLL_LATENCY, gt=0)

    # Application
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator(
        "processor_contract_address",
        "usdc_token_address",
        "usdt_token_address",
    )
    @classmethod
    def validate_eth_address(cls, v: str) -> str:
        """Validate Ethereum address format."""
        if not ADDRESS_PATTERN.match(v):
            raise ValueError(
                f"Invalid Ethereum address: {v}. "
                "Must start with 0x and be 42 characters long."
            )
        return v

    @field_validator("deep_link_scheme")
    @classmethod
    def validate_scheme(cls, v: str) -> str:
        """Validate custom URI scheme (RFC 3986 scheme characters)."""
        if not re.match(r"^[a-zA-Z][a-zA-Z0-9+.-]*$", v):
            raise ValueError(f"Invalid URI scheme: {v}")
        return v.lower()

    @field_validator("web_base_url")
    @classmethod
    def validate_web_base_url(cls, v: str) -> str:
        """Validate web fallback base URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("WEB_BASE_URL must start with http:// or https://")
        return v.rstrip("/")

    @model_validator(mode="after")
    def warn_placeholder_key(self) -> "Settings":
        """Warn when the signing key looks like a placeholder."""
        if self.wallet_private_key and "your_" in self.wallet_private_key.lower():
            logger.warning(
                "WALLET_PRIVATE_KEY appears to be a placeholder. "
                "Transactions cannot be signed until a real key is set."
            )
        return self


# Global settings instance
settings = Settings()
