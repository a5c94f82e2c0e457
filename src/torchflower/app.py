"""Torchflower application class.

Mutable during setup (route registration, error hook).
Frozen at runtime when app.run() or __call__() is first invoked.
"""

import logging
import threading
from collections.abc import Callable

from torchflower._internal.asgi import Receive, Scope, Send
from torchflower._internal.types import ErrorHandler, Handler
from torchflower.config import AppConfig
from torchflower.http.request import Request
from torchflower.routing.router import Router
from torchflower.server.errors import default_error_handler
from torchflower.server.handler import handle_request

logger = logging.getLogger("torchflower.routing")


class App:
    """The torchflower application.

    Usage::

        from torchflower import App, Response, guard

        app = App()

        @app.get("/")
        async def index(request):
            return Response("Hello, World!")

        app.run(on_listen=lambda: print("Serving on port 3000!"))

    Thread safety:
        The setup phase is single-threaded (decorators at import time).
        The freeze transition uses a Lock + double-check so exactly one
        thread compiles the route table, even when several ASGI workers
        call ``__call__()`` concurrently on the first request.
    """

    __slots__ = (
        "_error_handler",
        "_freeze_lock",
        "_frozen",
        "_router",
        "config",
        "listening",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self.listening: bool = False
        self._router: Router = Router()
        self._error_handler: ErrorHandler = default_error_handler
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    # -- Route registration --

    def add_route(self, method: str, path: str, handler: Handler) -> bool:
        """Bind *handler* to (*method*, *path*).

        Returns ``False`` if the pair is already bound. The first handler
        stays in place and the duplicate is logged.
        """
        self._check_not_frozen()
        added = self._router.register(method.upper(), path, handler)
        if not added:
            logger.warning(
                "Ignoring duplicate route %s %s (%s); the first registration wins",
                method.upper(),
                path,
                getattr(handler, "__qualname__", repr(handler)),
            )
        return added

    def route(self, path: str, *, method: str = "GET") -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        Args:
            path: Exact URL path. No parameters or wildcards.
            method: One of GET, HEAD, POST, PUT, DELETE, PATCH.
        """

        def decorator(func: Handler) -> Handler:
            self.add_route(method, path, func)
            return func

        return decorator

    def get(self, path: str) -> Callable[[Handler], Handler]:
        """Register a GET handler via decorator."""
        return self.route(path, method="GET")

    def head(self, path: str) -> Callable[[Handler], Handler]:
        """Register a HEAD handler via decorator."""
        return self.route(path, method="HEAD")

    def post(self, path: str) -> Callable[[Handler], Handler]:
        """Register a POST handler via decorator."""
        return self.route(path, method="POST")

    def put(self, path: str) -> Callable[[Handler], Handler]:
        """Register a PUT handler via decorator."""
        return self.route(path, method="PUT")

    def delete(self, path: str) -> Callable[[Handler], Handler]:
        """Register a DELETE handler via decorator."""
        return self.route(path, method="DELETE")

    def patch(self, path: str) -> Callable[[Handler], Handler]:
        """Register a PATCH handler via decorator."""
        return self.route(path, method="PATCH")

    # -- Error hook --

    def set_error_handler(self, handler: ErrorHandler) -> None:
        """Replace the error hook.

        The hook receives the exception that escaped a route handler and
        returns the response to send (sync or async). Only one hook is
        active; the default answers ``500 Internal Server Error``.
        """
        self._check_not_frozen()
        self._error_handler = handler

    def error_handler(self, func: ErrorHandler) -> ErrorHandler:
        """Decorator form of ``set_error_handler``::

            @app.error_handler
            async def on_error(exc: Exception) -> Response:
                return Response("Something broke", status=500)
        """
        self.set_error_handler(func)
        return func

    # -- Introspection --

    @property
    def router(self) -> Router:
        """The route table."""
        return self._router

    def request_ip(self, request: Request) -> str | None:
        """The client's IP address, if the server reported one."""
        if request.client is None:
            return None
        return request.client[0]

    # -- Server --

    def run(
        self,
        host: str | None = None,
        port: int | None = None,
        *,
        on_listen: Callable[[], object] | None = None,
    ) -> None:
        """Freeze the app and serve it with pounce.

        Args:
            host: Override bind host.
            port: Override bind port.
            on_listen: Called once the app is frozen, just before the
                server starts accepting connections.
        """
        from torchflower.server.runner import run_server

        self._ensure_frozen()
        self.listening = True
        if on_listen is not None:
            on_listen()
        try:
            run_server(
                self,
                self.config,
                host=host if host is not None else self.config.host,
                port=port if port is not None else self.config.port,
            )
        finally:
            self.listening = False

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()

        await handle_request(
            scope,
            receive,
            send,
            router=self._router,
            error_handler=self._error_handler,
            debug=self.config.debug,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup, before the first HTTP request.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                self._ensure_frozen()
                self.listening = True
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                self.listening = False
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._router.compile()
            self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes and the error handler before calling app.run()."
            )
            raise RuntimeError(msg)
