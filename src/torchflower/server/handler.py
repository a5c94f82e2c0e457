"""ASGI handler — translates ASGI scope/messages to torchflower types.

The only component that touches raw ASGI directly. Converts the scope to
an immutable Request, dispatches it through the router, and sends the
Response back through ASGI send().
"""

from torchflower._internal.asgi import Receive, Scope, Send
from torchflower._internal.types import ErrorHandler
from torchflower.http.request import Request
from torchflower.routing.router import Router
from torchflower.server.errors import handle_internal_error
from torchflower.server.negotiation import negotiate
from torchflower.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    error_handler: ErrorHandler,
    debug: bool,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)

    try:
        response = negotiate(await router.dispatch(request))
    except Exception as exc:
        response = await handle_internal_error(exc, request, error_handler, debug)

    await send_response(response, send, method=request.method)
