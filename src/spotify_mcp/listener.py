"""HTTP front end for the SSE transport."""

from __future__ import annotations

import logging
from typing import Optional

from starlette.datastructures import MutableHeaders
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class HttpListener:
    """
    ASGI app routing browser traffic to the SSE transport.

    Routes:
        OPTIONS *            -> 204 preflight
        GET {sse_path}       -> SSE handshake (delegated)
        POST {message_path}  -> client messages (delegated)
        GET /                -> service descriptor
        anything else        -> 404
    """

    def __init__(
        self,
        name: str,
        version: str,
        sse_path: str,
        message_path: str,
        stream_app: Optional[ASGIApp] = None,
    ) -> None:
        self.name = name
        self.version = version
        self.sse_path = sse_path
        self.message_path = message_path.rstrip("/") or "/"
        self.stream_app = stream_app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            # lifespan starts the transport's session manager
            if self.stream_app is not None:
                await self.stream_app(scope, receive, send)
            return

        request = Request(scope, receive)
        method = request.method
        path = request.url.path

        if method == "OPTIONS":
            response: Response = Response(status_code=204)
        elif self._is_stream_request(method, path):
            if self.stream_app is None:
                logger.error("SSE transport unavailable for %s %s", method, path)
                response = PlainTextResponse(
                    "SSE transport does not expose a request handler", status_code=500
                )
            else:
                await self.stream_app(scope, receive, _with_cors(send))
                return
        elif method == "GET" and path == "/":
            response = JSONResponse(
                {
                    "name": self.name,
                    "version": self.version,
                    "transport": "sse",
                    "ssePath": self.sse_path,
                }
            )
        else:
            response = PlainTextResponse("Not found", status_code=404)

        response.headers.update(CORS_HEADERS)
        await response(scope, receive, send)

    def _is_stream_request(self, method: str, path: str) -> bool:
        if method == "GET":
            return path == self.sse_path
        if method == "POST":
            return path == self.message_path or path.startswith(self.message_path + "/")
        return False


def _with_cors(send: Send) -> Send:
    async def send_with_cors(message: Message) -> None:
        if message["type"] == "http.response.start":
            headers = MutableHeaders(scope=message)
            for key, value in CORS_HEADERS.items():
                headers[key] = value
        await send(message)

    return send_with_cors
