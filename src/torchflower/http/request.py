"""Immutable HTTP request.

Frozen metadata with async body access. Handlers receive the request,
read the body with ``await request.json()``, and narrow it with a guard.
"""

from __future__ import annotations

import json as json_module
from collections.abc import AsyncGenerator
from dataclasses import dataclass, field
from typing import Any

from torchflower._internal.asgi import Receive, Scope
from torchflower.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Metadata (method, path, headers) is frozen at creation.
    The body is read asynchronously via ``.body()``, ``.text()``, ``.json()``.
    """

    method: str
    path: str
    headers: Headers
    query_string: bytes
    http_version: str
    server: tuple[str, int] | None
    client: tuple[str, int] | None

    # Private: ASGI receive callable for body streaming
    _receive: Receive

    # Private: body cache (the dict is mutable, the field reference is not)
    _cache: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    # -- Computed properties --

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get("content-type")

    @property
    def url(self) -> str:
        """Request target: path plus query string."""
        if self.query_string:
            return f"{self.path}?{self.query_string.decode('latin-1')}"
        return self.path

    # -- Async body access --

    async def body(self) -> bytes:
        """Read the full request body.

        The ASGI receive channel is consumed once; later calls return the
        cached bytes.
        """
        if "_body" in self._cache:
            return self._cache["_body"]
        chunks = [chunk async for chunk in self.stream()]
        result = b"".join(chunks)
        self._cache["_body"] = result
        return result

    async def stream(self) -> AsyncGenerator[bytes]:
        """Stream the request body in chunks."""
        while True:
            message = await self._receive()
            body = message.get("body", b"")
            if body:
                yield body
            if not message.get("more_body", False):
                break

    async def text(self) -> str:
        """Read the body as text (UTF-8)."""
        raw = await self.body()
        return raw.decode("utf-8")

    async def json(self) -> Any:
        """Decode the body as JSON into an arbitrary, unvalidated value.

        Raises ``ValueError`` (``json.JSONDecodeError``) for a malformed
        body. Pass the result through a checked guard before use.
        """
        raw = await self.body()
        return json_module.loads(raw)

    # -- Factory --

    @classmethod
    def from_asgi(cls, scope: Scope, receive: Receive) -> Request:
        """Create a Request from an ASGI scope and receive callable."""
        server = scope.get("server")
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
            query_string=scope.get("query_string", b""),
            http_version=scope.get("http_version", "1.1"),
            server=tuple(server) if server else None,
            client=tuple(client) if client else None,
            _receive=receive,
        )
