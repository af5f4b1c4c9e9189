"""MCP server setup for the Spotify adapter."""

import json
import logging
from copy import deepcopy
from typing import Any, Awaitable, Callable, Dict, List, Optional

import fastmcp
from fastmcp import FastMCP
from fastmcp.server.middleware import Middleware, MiddlewareContext
from fastmcp.tools.tool import Tool
from fastmcp.tools.tool import ToolResult as McpToolResult
from mcp.types import TextContent as McpTextContent
from pydantic import Field

from . import __version__, tool_registry
from .auth import TokenBootstrap
from .config import Settings
from .listener import HttpListener
from .models import JsonContent, ResourceDescriptor, ToolResult
from .service import SpotifyService
from .spotify_client import SpotifyClient

logger = logging.getLogger(__name__)


class DispatchedTool(Tool):
    """Tool that hands raw arguments to the dispatcher.

    ``parameters`` advertises the declared schema, but arguments are not
    validated against it here; the dispatcher reports missing fields itself.
    """

    service: Any = Field(exclude=True)

    async def run(self, arguments: Dict[str, Any]) -> McpToolResult:
        result = await self.service.call_tool(self.name, arguments)
        return render_tool_result(result)


class UnregisteredToolMiddleware(Middleware):
    """Answers calls to unknown tool names with the dispatcher's text reply."""

    def __init__(self, service: SpotifyService) -> None:
        self.service = service

    async def on_call_tool(self, context: MiddlewareContext, call_next):  # type: ignore[no-untyped-def]
        name = context.message.name
        if tool_registry.has_tool(name):
            return await call_next(context)
        result = await self.service.call_tool(name, context.message.arguments or {})
        return render_tool_result(result)


def build_server(settings: Settings) -> tuple[FastMCP, HttpListener]:
    spotify_client = SpotifyClient(
        client_id=settings.spotify_client_id,
        client_secret=settings.spotify_client_secret,
        api_base_url=settings.spotify_api_base_url,
        accounts_url=settings.spotify_accounts_url,
        timeout_seconds=settings.spotify_api_timeout_seconds,
        access_token=settings.spotify_access_token,
    )
    token = TokenBootstrap(
        spotify_client,
        client_id=settings.spotify_client_id,
        client_secret=settings.spotify_client_secret,
    )
    service = SpotifyService(spotify_client, token)

    mcp = FastMCP(settings.mcp_server_name, instructions=_instructions(), version=__version__)
    mcp.add_middleware(UnregisteredToolMiddleware(service))

    for descriptor in tool_registry.list_tools():
        mcp.add_tool(
            DispatchedTool(
                name=descriptor.name.value,
                description=descriptor.description,
                parameters=deepcopy(descriptor.input_schema),
                service=service,
            )
        )
        logger.info("Registered tool: %s", descriptor.name.value)

    for resource in tool_registry.list_resources():
        mcp.resource(
            resource.uri.value,
            name=resource.name,
            description=resource.description,
            mime_type=resource.mime_type,
        )(_resource_reader(service, resource))
        logger.info("Registered resource: %s", resource.uri.value)

    listener = HttpListener(
        name=settings.mcp_server_name,
        version=__version__,
        sse_path=settings.mcp_sse_path,
        message_path=fastmcp.settings.message_path,
        stream_app=_get_stream_app(mcp, settings),
    )
    return mcp, listener


def render_tool_result(result: ToolResult) -> McpToolResult:
    blocks: List[McpTextContent] = []
    for block in result.content:
        if isinstance(block, JsonContent):
            blocks.append(McpTextContent(type="text", text=json.dumps(block.json)))
        else:
            blocks.append(McpTextContent(type="text", text=block.text))
    return McpToolResult(content=blocks)


def _resource_reader(
    service: SpotifyService, resource: ResourceDescriptor
) -> Callable[[], Awaitable[str]]:
    async def reader() -> str:
        contents = await service.read_resource(resource.uri.value)
        return contents.text

    reader.__name__ = resource.uri.value.replace(":", "_").replace("-", "_")
    return reader


def _get_stream_app(mcp: FastMCP, settings: Settings) -> Optional[Any]:
    http_app = getattr(mcp, "http_app", None)
    if http_app is None:
        logger.warning("FastMCP SSE app not available; %s will answer 500", settings.mcp_sse_path)
        return None
    return http_app(path=settings.mcp_sse_path, transport="sse")


def _instructions() -> str:
    return (
        "Spotify adapter. Search the catalog, start or pause playback, "
        "and read the current playback state or user profile."
    )
