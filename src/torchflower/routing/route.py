"""Route frozen dataclass and the closed set of HTTP methods."""

from dataclasses import dataclass
from typing import Literal

from torchflower._internal.types import Handler

type Method = Literal["GET", "HEAD", "POST", "PUT", "DELETE", "PATCH"]

METHODS: frozenset[str] = frozenset({"GET", "HEAD", "POST", "PUT", "DELETE", "PATCH"})


@dataclass(frozen=True, slots=True)
class Route:
    """A registered (method, path, handler) triple.

    ``path`` is matched byte for byte: no parameters, no wildcards,
    no trailing-slash normalization.
    """

    method: str
    path: str
    handler: Handler
