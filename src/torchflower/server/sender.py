"""ASGI response sending — translates a Response into ASGI messages."""

from torchflower._internal.asgi import Send
from torchflower.http.response import Response


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


async def send_response(response: Response, send: Send, *, method: str = "GET") -> None:
    """Translate a torchflower Response into ASGI send() calls.

    A HEAD response keeps the ``content-length`` of the body it would
    have sent, but sends none.
    """
    raw_headers: list[tuple[bytes, bytes]] = [
        (b"content-type", response.content_type.encode("latin-1")),
    ]
    for name, value in response.headers:
        raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))

    body = response.body_bytes if _body_allowed(response.status) else b""
    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))
    if method == "HEAD":
        body = b""

    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body,
        }
    )
