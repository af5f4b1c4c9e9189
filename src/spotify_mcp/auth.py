"""Lazy access-token bootstrap for the Spotify client."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from .spotify_client import SpotifyClient


logger = logging.getLogger(__name__)


class TokenBootstrap:
    """Sole owner of token installation on the shared client.

    Falls back to the client-credentials grant when no token is held. That
    token only covers catalog endpoints; player and profile calls still need a
    user token and will fail with Spotify's authorization error without one.
    """

    def __init__(self, client: SpotifyClient, client_id: str, client_secret: str) -> None:
        self.client = client
        self.client_id = client_id
        self.client_secret = client_secret
        self._lock = asyncio.Lock()

    def get(self) -> Optional[str]:
        return self.client.get_access_token()

    async def ensure(self) -> None:
        if self.client.get_access_token():
            return

        async with self._lock:
            # Another caller may have finished the grant while we waited.
            if self.client.get_access_token():
                return
            if not (self.client_id and self.client_secret):
                logger.debug("No Spotify app credentials configured; continuing without a token")
                return

            logger.info("Requesting Spotify client-credentials token")
            body = await self.client.client_credentials_grant()
            self.client.set_access_token(body["access_token"])
