"""
ASGI middleware for the relay API.
"""
import logging
from typing import List

from starlette.datastructures import Headers
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

DEFAULT_MAX_BODY_BYTES = 256 * 1024


class BodySizeLimitMiddleware:
    """
    Reject request bodies larger than `max_body_bytes` with 413.

    A declared Content-Length is checked before anything is read. Bodies
    without one (chunked uploads) are buffered up to the limit and then
    replayed to the application.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int = DEFAULT_MAX_BODY_BYTES):
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        declared = Headers(scope=scope).get("content-length")
        if declared is not None and declared.isdigit() and int(declared) > self.max_body_bytes:
            await self._reject(scope, receive, send)
            return

        chunks: List[bytes] = []
        size = 0
        more_body = True
        while more_body:
            message = await receive()
            if message["type"] != "http.request":
                # Client went away; let the app observe the disconnect
                break
            body = message.get("body", b"")
            size += len(body)
            if size > self.max_body_bytes:
                await self._reject(scope, receive, send)
                return
            chunks.append(body)
            more_body = message.get("more_body", False)
        else:
            message = {"type": "http.request", "body": b"".join(chunks), "more_body": False}

        replayed = False

        async def replay() -> Message:
            nonlocal replayed
            if not replayed:
                replayed = True
                return message
            return await receive()

        await self.app(scope, replay, send)

    async def _reject(self, scope: Scope, receive: Receive, send: Send) -> None:
        logger.warning(
            f"Rejected {scope['method']} {scope['path']}: body exceeds {self.max_body_bytes} bytes"
        )
        response = JSONResponse(
            status_code=413,
            content={
                'error': 'PAYLOAD_TOO_LARGE',
                'message': f"Request body exceeds {self.max_body_bytes} bytes",
                'details': {'max_body_bytes': self.max_body_bytes},
            },
        )
        await response(scope, receive, send)
