"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(port=8080, debug=True)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False  # single worker + auto-reload, exception detail in 500 bodies
    workers: int = 1

    # Logging (applied by pounce)
    log_level: str = "info"
