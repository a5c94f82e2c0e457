"""Two-level route table: method -> exact path -> route.

Routes are registered during setup and the table is frozen by
``compile()`` before the app starts serving.
"""

import logging

from torchflower._internal.invoke import invoke
from torchflower._internal.types import Handler
from torchflower.errors import ConfigurationError
from torchflower.http.request import Request
from torchflower.http.response import Response
from torchflower.routing.route import METHODS, Route

logger = logging.getLogger("torchflower.routing")

NOT_FOUND_BODY = "404 Not Found"


def not_found() -> Response:
    """The fixed response for a request no route matches."""
    return Response(body=NOT_FOUND_BODY, status=404, content_type="text/plain; charset=utf-8")


class Router:
    """Exact-match router.

    Usage::

        router = Router()
        router.register("GET", "/", index)
        router.compile()
        response = await router.dispatch(request)

    Thread safety:
        ``register`` is meant for the single-threaded setup phase and is
        not synchronized. ``match`` and ``dispatch`` only read the table
        and are safe to call concurrently once setup is complete.
    """

    __slots__ = ("_compiled", "_routes")

    def __init__(self) -> None:
        self._routes: dict[str, dict[str, Route]] = {}
        self._compiled = False

    def register(self, method: str, path: str, handler: Handler) -> bool:
        """Bind *handler* to (*method*, *path*).

        Returns ``False`` and leaves the table untouched when the pair is
        already bound; the first registration wins.

        Raises:
            ConfigurationError: If *method* is not one of GET, HEAD, POST,
                PUT, DELETE, PATCH.
            RuntimeError: If the router has been compiled.
        """
        if self._compiled:
            msg = "Cannot register routes after compilation."
            raise RuntimeError(msg)
        if method not in METHODS:
            allowed = ", ".join(sorted(METHODS))
            msg = f"Unsupported HTTP method {method!r}. Use one of: {allowed}."
            raise ConfigurationError(msg)

        routes = self._routes.setdefault(method, {})
        if path in routes:
            return False

        routes[path] = Route(method=method, path=path, handler=handler)
        return True

    @property
    def routes(self) -> list[Route]:
        """All registered routes, grouped by method in registration order."""
        return [route for routes in self._routes.values() for route in routes.values()]

    def compile(self) -> None:
        """Freeze the router. No more routes can be registered."""
        self._compiled = True

    def match(self, method: str, path: str) -> Route | None:
        """Return the route bound to exactly (*method*, *path*), if any."""
        routes = self._routes.get(method)
        if routes is None:
            return None
        return routes.get(path)

    async def dispatch(self, request: Request) -> Response:
        """Call the handler bound to the request's method and path.

        The handler's result is returned as is. A request no route matches
        gets the fixed 404 response; no handler is called and nothing is
        raised. Exceptions from the handler propagate to the caller.
        """
        route = self.match(request.method, request.path)
        if route is None:
            logger.debug("404 %s %s", request.method, request.path)
            return not_found()
        return await invoke(route.handler, request)
