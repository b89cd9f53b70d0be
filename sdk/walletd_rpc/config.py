"""Client configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class WalletdSettings(BaseSettings):
    """walletd connection settings loaded from WALLETD_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WALLETD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # JSON-RPC endpoint of the daemon
    RPC_URL: str = "http://127.0.0.1:8070/json_rpc"

    # Sent in every request envelope as "password"
    RPC_PASSWORD: str = ""

    # Request timeout in seconds
    TIMEOUT: float = 30.0

    # walletd ignores the id, every request uses the same one
    REQUEST_ID: int = 0


@lru_cache
def get_settings() -> WalletdSettings:
    """Get cached settings instance."""
    return WalletdSettings()
