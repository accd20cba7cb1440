"""
ASGI middleware that binds an X-Request-ID to every HTTP request.
"""

import logging

from .context import RequestContext

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = b"x-request-id"


def _incoming_request_id(headers) -> str | None:
    for key, value in headers:
        if key.lower() != REQUEST_ID_HEADER:
            continue
        try:
            return value.decode("utf-8") or None
        except UnicodeDecodeError as e:
            logger.warning(f"Ignoring undecodable X-Request-ID header: {e}")
            return None
    return None


class CorrelationIdMiddleware:
    """
    Reuses the client's X-Request-ID (or mints one), binds it for the
    request's log lines and echoes it on the response.
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        with RequestContext(request_id=_incoming_request_id(scope.get("headers", []))) as ctx:
            echoed = ctx.request_id.encode("utf-8")

            async def send_with_request_id(message):
                if message["type"] == "http.response.start":
                    message["headers"] = [*message.get("headers", []), (REQUEST_ID_HEADER, echoed)]
                await send(message)

            await self.app(scope, receive, send_with_request_id)
