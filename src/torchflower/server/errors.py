"""Error hook — maps an exception that escaped a handler to a Response.

The app holds exactly one hook. It is consulted only by the server
pipeline, never by the router or the guard engine. A guard failure that
was not wrapped in ``guard.check()`` lands here like any other exception
and is answered as a server error.
"""

import logging

from torchflower._internal.invoke import invoke
from torchflower._internal.types import ErrorHandler
from torchflower.http.request import Request
from torchflower.http.response import Response
from torchflower.server.negotiation import negotiate

logger = logging.getLogger("torchflower.server")

INTERNAL_ERROR_BODY = "500 Internal Server Error"


def default_error_handler(exc: Exception) -> Response:
    """The stock hook: a fixed plain-text 500."""
    return Response(body=INTERNAL_ERROR_BODY, status=500)


async def handle_internal_error(
    exc: Exception,
    request: Request,
    error_handler: ErrorHandler,
    debug: bool,
) -> Response:
    """Log *exc* and let *error_handler* build the response.

    A hook that itself raises is logged and replaced by the default 500.
    """
    logger.exception("500 %s %s", request.method, request.path)

    if debug and error_handler is default_error_handler:
        detail = f"{INTERNAL_ERROR_BODY}\n\n{type(exc).__name__}: {exc}"
        return Response(body=detail, status=500)

    try:
        return negotiate(await invoke(error_handler, exc))
    except Exception:
        logger.exception("Error handler failed for %s %s", request.method, request.path)
        return default_error_handler(exc)
