"""Static tool and resource registry for the Spotify MCP server."""

from __future__ import annotations

from typing import List

from .models import ResourceDescriptor, ResourceUri, ToolDescriptor, ToolName


TOOLS: tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        name=ToolName.SEARCH,
        description=(
            "Search Spotify for tracks, artists, or albums. "
            "Params: q (query), type (track|artist|album), limit (1-50) default 10."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "q": {"type": "string"},
                "type": {"type": "string", "enum": ["track", "artist", "album"]},
                "limit": {"type": "number", "minimum": 1, "maximum": 50, "default": 10},
            },
            "required": ["q", "type"],
        },
    ),
    ToolDescriptor(
        name=ToolName.PLAY,
        description=(
            "Start or resume playback on the user's active device. "
            "Params: uris (array of track URIs) or context_uri."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "uris": {"type": "array", "items": {"type": "string"}},
                "context_uri": {"type": "string"},
                "position_ms": {"type": "number"},
            },
        },
    ),
    ToolDescriptor(
        name=ToolName.PAUSE,
        description="Pause playback on the user's active device.",
        input_schema={"type": "object", "properties": {}},
    ),
)


RESOURCES: tuple[ResourceDescriptor, ...] = (
    ResourceDescriptor(
        uri=ResourceUri.CURRENTLY_PLAYING,
        mime_type="application/json",
        name="Currently Playing",
        description="The user's currently playing item info",
    ),
    ResourceDescriptor(
        uri=ResourceUri.USER_PROFILE,
        mime_type="application/json",
        name="User Profile",
        description="Current user profile information",
    ),
)


def list_tools() -> List[ToolDescriptor]:
    return list(TOOLS)


def list_resources() -> List[ResourceDescriptor]:
    return list(RESOURCES)


def has_tool(name: str) -> bool:
    return any(tool.name.value == name for tool in TOOLS)
