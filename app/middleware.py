from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send
import uuid

from app.core.logging import request_id_ctx_var

REQUEST_ID_HEADER = "x-request-id"


class CorrelationIdMiddleware:
    """Attach or generate an X-Request-ID for each request, expose it to log
    records through request_id_ctx_var and echo it on the response.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        # Only act on HTTP requests
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers", []))
        raw = headers.get(REQUEST_ID_HEADER.encode())
        request_id = raw.decode("latin-1") if raw else str(uuid.uuid4())
        token = request_id_ctx_var.set(request_id)

        async def send_with_request_id(message: Message):
            if message["type"] == "http.response.start":
                MutableHeaders(scope=message)[REQUEST_ID_HEADER] = request_id
            await send(message)

        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            request_id_ctx_var.reset(token)
