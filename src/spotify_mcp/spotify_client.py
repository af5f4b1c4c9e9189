"""Spotify Web API client used by the MCP handlers."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)


class SpotifyApiError(Exception):
    """Non-2xx response from Spotify, carrying Spotify's own message."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class SpotifyClient:
    def __init__(
        self,
        client_id: str,
        client_secret: str,
        api_base_url: str = "https://api.spotify.com/v1",
        accounts_url: str = "https://accounts.spotify.com",
        timeout_seconds: float = 20,
        access_token: Optional[str] = None,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.api_base_url = api_base_url.rstrip("/")
        self.accounts_url = accounts_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._access_token = access_token or None

    def get_access_token(self) -> Optional[str]:
        return self._access_token

    def set_access_token(self, token: str) -> None:
        self._access_token = token

    def _headers(self) -> Dict[str, str]:
        if not self._access_token:
            return {}
        return {"Authorization": f"Bearer {self._access_token}"}

    async def client_credentials_grant(self) -> Dict[str, Any]:
        url = f"{self.accounts_url}/api/token"
        async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
            response = await client.post(
                url,
                data={"grant_type": "client_credentials"},
                auth=(self.client_id, self.client_secret),
            )
        return self._parse(response)

    async def search_tracks(self, query: str, limit: int = 10) -> Dict[str, Any]:
        return await self._search(query, "track", limit)

    async def search_artists(self, query: str, limit: int = 10) -> Dict[str, Any]:
        return await self._search(query, "artist", limit)

    async def search_albums(self, query: str, limit: int = 10) -> Dict[str, Any]:
        return await self._search(query, "album", limit)

    async def play(self, options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return await self._request("PUT", "/me/player/play", json=options or {})

    async def pause(self) -> Dict[str, Any]:
        return await self._request("PUT", "/me/player/pause")

    async def get_current_playback_state(self) -> Dict[str, Any]:
        return await self._request("GET", "/me/player")

    async def get_me(self) -> Dict[str, Any]:
        return await self._request("GET", "/me")

    async def _search(self, query: str, search_type: str, limit: int) -> Dict[str, Any]:
        params: Dict[str, Any] = {"q": query, "type": search_type, "limit": limit}
        return await self._request("GET", "/search", params=params)

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> Dict[str, Any]:
        url = f"{self.api_base_url}{path}"
        async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
            response = await client.request(
                method, url, headers=self._headers(), params=params, json=json
            )
        return self._parse(response)

    def _parse(self, response: httpx.Response) -> Dict[str, Any]:
        if response.is_success:
            # Player endpoints answer 204 with no body.
            if not response.content:
                return {}
            return response.json()

        message = _error_message(response)
        logger.warning(
            "Spotify request failed: %s %s -> %s %s",
            response.request.method,
            response.request.url.path,
            response.status_code,
            message,
        )
        raise SpotifyApiError(response.status_code, message)


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase

    if isinstance(payload, dict):
        error = payload.get("error")
        # Web API errors nest {status, message}; Accounts errors are flat.
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if payload.get("error_description"):
            return str(payload["error_description"])
        if isinstance(error, str):
            return error
    return response.text or response.reason_phrase

