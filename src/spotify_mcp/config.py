"""Configuration for the Spotify MCP server."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="", case_sensitive=False, env_file=".env", extra="ignore"
    )

    mcp_server_name: str = Field(default="spotify-mcp-server")
    mcp_server_host: str = Field(default="0.0.0.0")
    mcp_server_port: int = Field(default=7312)
    mcp_sse_path: str = Field(default="/sse")
    mcp_log_level: str = Field(default="INFO")

    spotify_client_id: str = Field(default="")
    spotify_client_secret: str = Field(default="")
    spotify_redirect_uri: str = Field(default="")
    spotify_access_token: Optional[str] = Field(default=None)

    spotify_api_base_url: str = Field(default="https://api.spotify.com/v1")
    spotify_accounts_url: str = Field(default="https://accounts.spotify.com")
    spotify_api_timeout_seconds: float = Field(default=20)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
