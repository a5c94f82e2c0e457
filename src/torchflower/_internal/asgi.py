"""ASGI type aliases.

The server pipeline and the test client speak raw ASGI; everything past
``Request.from_asgi`` uses torchflower types.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

# Raw ASGI types (matching the ASGI 3.0 spec)
Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]
