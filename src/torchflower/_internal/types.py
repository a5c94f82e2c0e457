"""Shared type aliases used across torchflower modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler: receives the Request, returns a Response (sync or async)
Handler: TypeAlias = Callable[..., Any]

# Error hook: receives the escaped exception, returns a Response (sync or async)
ErrorHandler: TypeAlias = Callable[..., Any]
