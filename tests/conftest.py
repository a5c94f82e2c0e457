"""Shared helpers for torchflower tests."""

from typing import Any

import pytest

from torchflower.http.request import Request


def make_scope(**overrides: object) -> dict[str, object]:
    """Build a minimal valid ASGI HTTP scope."""
    base: dict[str, object] = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/",
        "raw_path": b"/",
        "query_string": b"",
        "root_path": "",
        "headers": [],
        "server": ("localhost", 3000),
        "client": ("127.0.0.1", 54321),
    }
    base.update(overrides)
    return base


def make_receive(*bodies: bytes):
    """Create an ASGI receive callable that yields *bodies* in order."""
    messages = []
    for i, body in enumerate(bodies):
        is_last = i == len(bodies) - 1
        messages.append({"type": "http.request", "body": body, "more_body": not is_last})
    if not messages:
        messages.append({"type": "http.request", "body": b"", "more_body": False})
    it = iter(messages)

    async def receive() -> dict[str, Any]:
        return next(it)

    return receive


@pytest.fixture
def make_request():
    """Factory fixture: ``make_request("POST", "/task", b'{...}')``."""

    def factory(method: str = "GET", path: str = "/", *bodies: bytes, **scope: object) -> Request:
        return Request.from_asgi(make_scope(method=method, path=path, **scope), make_receive(*bodies))

    return factory
