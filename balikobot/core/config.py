"""
core/config.py
----------------

Client configuration module.

Defines strongly‑typed settings loaded from the environment using
``pydantic-settings``. These settings hold the API credentials, the
base host of each API version and the transport timeout. The values
provided here are sensible defaults but can be overridden via
environment variables at deployment time.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    The settings structure is flat and uses environment variables
    prefixed with ``BALIKOBOT_``.  For example, to override the default
    request timeout you can set ``BALIKOBOT_HTTP_TIMEOUT=15``.
    """

    # Credentials (HTTP Basic)
    api_user: Optional[str] = Field(None, description="API user issued by the carrier gateway.")
    api_key: Optional[str] = Field(None, description="API key issued by the carrier gateway.")

    # API hosts, one per version
    api_v1_url: str = Field("https://api.balikobot.cz", description="Base URL of the v1 API.")
    api_v2_url: str = Field("https://apiv2.balikobot.cz", description="Base URL of the v2 API.")

    # HTTP client settings
    http_timeout: float = Field(30.0, gt=0, description="Hard timeout for HTTP requests in seconds.")
    http2: bool = Field(True, description="Negotiate HTTP/2 with the gateway.")

    log_level: str = Field("INFO", description="Level of the balikobot logger.")

    model_config = SettingsConfigDict(env_prefix="BALIKOBOT_", env_file=None, case_sensitive=False)


@lru_cache()
def get_settings() -> Settings:
    """Return a cached instance of the client settings."""
    return Settings()
