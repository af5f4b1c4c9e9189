from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from spotify_mcp.auth import TokenBootstrap
from spotify_mcp.service import SpotifyService
from spotify_mcp.spotify_client import SpotifyClient

API_BASE = "https://api.spotify.test/v1"
ACCOUNTS = "https://accounts.spotify.test"


@pytest.fixture
def spotify_client() -> SpotifyClient:
    return SpotifyClient(
        client_id="client-id",
        client_secret="client-secret",
        api_base_url=API_BASE,
        accounts_url=ACCOUNTS,
    )


@pytest.fixture
def fake_client() -> MagicMock:
    client = MagicMock(spec=SpotifyClient)
    client.get_access_token.return_value = "user-token"
    return client


@pytest.fixture
def service(fake_client: MagicMock) -> SpotifyService:
    token = TokenBootstrap(fake_client, client_id="client-id", client_secret="client-secret")
    return SpotifyService(fake_client, token)
