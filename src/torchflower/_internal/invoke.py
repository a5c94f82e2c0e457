"""Invoke helper — call sync or async callables uniformly.

Route handlers and the error hook can be ``def`` or ``async def``.
Everything that calls user code goes through ``invoke`` so the
sync/async check lives in exactly one place.
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *handler* and await the result if it is awaitable::

        @app.get("/")
        def index(request):
            return Response("Hello, World!")

        @app.post("/task")
        async def create(request):
            payload = await request.json()
            ...
    """
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
