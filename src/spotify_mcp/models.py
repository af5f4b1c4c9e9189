"""Internal models for tools, resources and dispatch results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union


class ToolName(str, Enum):
    SEARCH = "spotify.search"
    PLAY = "spotify.play"
    PAUSE = "spotify.pause"


class ResourceUri(str, Enum):
    CURRENTLY_PLAYING = "spotify:currently-playing"
    USER_PROFILE = "spotify:user-profile"


class SearchType(str, Enum):
    TRACK = "track"
    ARTIST = "artist"
    ALBUM = "album"


class SoftFailure(str, Enum):
    """Failures reported to the caller as a normal tool result."""

    MISSING_PARAMETERS = "missing_parameters"
    INVALID_PARAMETERS = "invalid_parameters"
    UNKNOWN_TOOL = "unknown_tool"


@dataclass(frozen=True)
class ToolDescriptor:
    name: ToolName
    description: str
    input_schema: Dict[str, Any]


@dataclass(frozen=True)
class ResourceDescriptor:
    uri: ResourceUri
    mime_type: str
    name: str
    description: str


@dataclass(frozen=True)
class TextContent:
    text: str


@dataclass(frozen=True)
class JsonContent:
    json: Any


ContentBlock = Union[TextContent, JsonContent]


@dataclass(frozen=True)
class ToolResult:
    content: Tuple[ContentBlock, ...]
    failure: Optional[SoftFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def text(cls, text: str) -> "ToolResult":
        return cls(content=(TextContent(text),))

    @classmethod
    def json(cls, payload: Any) -> "ToolResult":
        return cls(content=(JsonContent(payload),))

    @classmethod
    def rejected(cls, failure: SoftFailure, text: str) -> "ToolResult":
        return cls(content=(TextContent(text),), failure=failure)


@dataclass(frozen=True)
class ResourceContents:
    uri: str
    mime_type: str
    text: str
