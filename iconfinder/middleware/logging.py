"""The middleware that writes a request summary log for every HTTP request."""

import logging
import time
from datetime import datetime

from starlette.requests import Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from iconfinder.utils.log_data_creators import create_request_summary_log_data

logger = logging.getLogger("request.summary")


class LoggingMiddleware:
    """Pure ASGI middleware, so that streamed icon bodies are not buffered."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        started = time.monotonic()

        async def send_with_summary(message: Message) -> None:
            if message["type"] == "http.response.start":
                duration_ms = int((time.monotonic() - started) * 1000)
                data = create_request_summary_log_data(
                    Request(scope=scope), message, datetime.now(), duration_ms
                )
                logger.info("", extra=data.model_dump())

            await send(message)

        await self.app(scope, receive, send_with_summary)
