"""CLI entry point for the Spotify MCP server."""

from __future__ import annotations

import asyncio
import logging

import uvicorn

from .config import get_settings
from .logging import configure_logging
from .server import build_server

logger = logging.getLogger(__name__)


async def _run() -> None:
    settings = get_settings()
    configure_logging(settings.mcp_log_level)

    mcp, app = build_server(settings)

    # log_config=None keeps uvicorn on the root handler; stdout is the stdio transport.
    config = uvicorn.Config(
        app,
        host=settings.mcp_server_host,
        port=settings.mcp_server_port,
        log_config=None,
    )
    server = uvicorn.Server(config)

    logger.info(
        "SSE listening at http://localhost:%s%s",
        settings.mcp_server_port,
        settings.mcp_sse_path,
    )
    await asyncio.gather(mcp.run_stdio_async(show_banner=False), server.serve())


def main() -> None:
    asyncio.run(_run())


if __name__ == "__main__":
    main()
