"""Request dispatch for Spotify tool calls and resource reads."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from .auth import TokenBootstrap
from .logging import redact_payload
from .models import (
    ResourceContents,
    ResourceUri,
    SearchType,
    SoftFailure,
    ToolName,
    ToolResult,
)
from .spotify_client import SpotifyClient

logger = logging.getLogger(__name__)

PLAYBACK_STARTED = "Playback started/resumed."
PLAYBACK_PAUSED = "Playback paused."
MISSING_SEARCH_PARAMETERS = "Missing required parameters q and type"


class UnknownResourceError(LookupError):
    pass


class SpotifyService:
    """
    Routes tool calls and resource reads to the Spotify client.

    Bad tool input and unknown tool names come back as tagged ``ToolResult``
    values; unknown resources and Spotify errors are raised.
    """

    def __init__(self, client: SpotifyClient, token: TokenBootstrap) -> None:
        self.client = client
        self.token = token

    async def call_tool(
        self, name: str, arguments: Optional[Dict[str, Any]] = None
    ) -> ToolResult:
        await self.token.ensure()

        arguments = arguments or {}
        try:
            tool = ToolName(name)
        except ValueError:
            logger.info("Unknown tool requested: %s", name)
            return ToolResult.rejected(SoftFailure.UNKNOWN_TOOL, f"Unknown tool: {name}")

        logger.info("Calling tool=%s arguments=%s", tool.value, redact_payload(arguments))

        if tool is ToolName.SEARCH:
            return await self._search(arguments)
        if tool is ToolName.PLAY:
            await self.client.play(arguments)
            return ToolResult.text(PLAYBACK_STARTED)
        if tool is ToolName.PAUSE:
            await self.client.pause()
            return ToolResult.text(PLAYBACK_PAUSED)
        raise AssertionError(f"Unhandled tool: {tool}")

    async def read_resource(self, uri: str) -> ResourceContents:
        await self.token.ensure()

        try:
            resource = ResourceUri(str(uri))
        except ValueError:
            raise UnknownResourceError(f"Unknown resource: {uri}") from None

        if resource is ResourceUri.CURRENTLY_PLAYING:
            body = await self.client.get_current_playback_state()
        elif resource is ResourceUri.USER_PROFILE:
            body = await self.client.get_me()
        else:
            raise AssertionError(f"Unhandled resource: {resource}")

        return ResourceContents(
            uri=resource.value, mime_type="application/json", text=json.dumps(body)
        )

    async def _search(self, arguments: Dict[str, Any]) -> ToolResult:
        query = arguments.get("q")
        raw_type = arguments.get("type")
        limit = arguments.get("limit", 10)
        if not query or not raw_type:
            return ToolResult.rejected(
                SoftFailure.MISSING_PARAMETERS, MISSING_SEARCH_PARAMETERS
            )

        try:
            search_type = SearchType(raw_type)
        except ValueError:
            return ToolResult.rejected(
                SoftFailure.INVALID_PARAMETERS, f"Unsupported search type: {raw_type}"
            )

        if search_type is SearchType.TRACK:
            body = await self.client.search_tracks(query, limit=limit)
        elif search_type is SearchType.ARTIST:
            body = await self.client.search_artists(query, limit=limit)
        else:
            body = await self.client.search_albums(query, limit=limit)
        return ToolResult.json(body)
