"""Serve an App through pounce.

Pounce's ``run()`` takes an import string (e.g. ``"myapp:app"``), but
torchflower has a live ``App`` object, so ``pounce.Server`` is used
directly with the ASGI callable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from torchflower.app import App
    from torchflower.config import AppConfig


def run_server(app: App, config: AppConfig, *, host: str, port: int) -> None:
    """Start a pounce server for *app* and block until it stops.

    ``config.debug`` turns on single-worker auto-reload; otherwise
    ``config.workers`` workers are started.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    server_config = ServerConfig(
        host=host,
        port=port,
        workers=1 if config.debug else config.workers,
        reload=config.debug,
        log_level=config.log_level,
    )
    Server(server_config, app).run()
