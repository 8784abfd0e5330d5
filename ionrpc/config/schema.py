"""Configuration schema using Pydantic.

Persisted to ~/.ionrpc/config.json; environment overrides use the
``IONRPC_`` prefix with ``__`` between nested keys.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientConfig(BaseModel):
    """Connection settings for one daemon RPC endpoint."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    host: str = "127.0.0.1"
    port: int = Field(default=55003, ge=1, le=65535)
    user: str = "user"
    password: str = Field(default="pass", alias="pass")
    protocol: Literal["http", "https"] = "https"
    logger: str = "normal"  # none | normal | debug (silent/verbose aliases)
    timeout: float | None = None  # handed to httpx; None waits indefinitely

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.host}:{self.port}"


class Config(BaseSettings):
    """Root configuration for ionrpc."""
    rpc: ClientConfig = Field(default_factory=ClientConfig)

    model_config = SettingsConfigDict(
        env_prefix="IONRPC_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Environment wins over values loaded from config.json.
        return env_settings, init_settings, dotenv_settings, file_secret_settings
