"""Torchflower — an exact-match ASGI router with composable runtime guards.

Basic usage::

    from torchflower import App, Response

    app = App()

    @app.get("/")
    async def index(request):
        return Response("Hello, World!")

    app.run(on_listen=lambda: print("Serving on port 3000!"))

Validating a JSON body at the trust boundary::

    from torchflower import guard

    is_priority = guard.or_(
        guard.string_literal("Critical"),
        guard.or_(guard.string_literal("Medium"), guard.string_literal("Low")),
    )

    is_task = guard.check(
        guard.record(lambda value: {
            "name": guard.string(value["name"]),
            "priority": is_priority(value["priority"]),
        })
    )

    @app.post("/task")
    async def create_task(request):
        task = is_task(await request.json())
        if task is None:
            return Response("400 Bad Request", status=400)
        return Response("200 OK")

An invalid body — wrong types or missing fields — gets a 400. A guard
used *without* ``guard.check()`` raises instead, and the error hook
answers 500.
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "GuardError",
    "Method",
    "Request",
    "Response",
    "Router",
    "TorchflowerError",
    "guard",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import torchflower`` fast while providing a clean top-level API.
    """
    if name == "App":
        from torchflower.app import App

        return App

    if name == "AppConfig":
        from torchflower.config import AppConfig

        return AppConfig

    if name == "Request":
        from torchflower.http.request import Request

        return Request

    if name == "Response":
        from torchflower.http.response import Response

        return Response

    if name in ("Method", "Router"):
        from torchflower import routing as _routing

        return getattr(_routing, name)

    if name == "guard":
        import torchflower.guard as _guard

        return _guard

    if name in ("ConfigurationError", "GuardError", "TorchflowerError"):
        from torchflower import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
