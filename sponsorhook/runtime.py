"""Sponsorhook runtime entrypoint.

This module provides the ASGI application factory used by Granian. The
relay configuration is read from the environment exactly once, when the
factory runs; a missing ``GITHUB_SECRET`` or ``DISCORD_WEBHOOK_URL`` stops
the process before it accepts any traffic.

Configuration is driven by environment variables:

- ``GITHUB_SECRET``: Webhook signing secret (required)
- ``DISCORD_WEBHOOK_URL``: Notification destination (required)
- ``SPONSORHOOK_DISCORD_TIMEOUT_S``: Outbound timeout (default ``10``)
- ``SPONSORHOOK_HOST``: Bind address (default ``0.0.0.0``)
- ``SPONSORHOOK_PORT``: Listen port (default ``8080``)
- ``SPONSORHOOK_LOG_LEVEL``: Log level (default ``INFO``)

Run the service directly with ``python -m sponsorhook.runtime``.
"""

from __future__ import annotations

import os
import typing as typ

from sponsorhook.logging import (
    configure_logging,
    get_logger,
    log_error,
    log_info,
    log_warning,
)
from sponsorhook.relay.config import RelayConfig
from sponsorhook.relay.errors import MissingSecretError

if typ.TYPE_CHECKING:
    import falcon.asgi

__all__ = ["create_app", "main"]

logger = get_logger(__name__)

# TCP port number range limits
_MIN_PORT = 1
_MAX_PORT = 65535


def _parse_port(port_str: str) -> int:
    """Parse and validate a port number string.

    Raises
    ------
    SystemExit
        If port_str is not a valid integer in range 1-65535.

    """
    try:
        port = int(port_str)
        if not (_MIN_PORT <= port <= _MAX_PORT):
            msg = f"port {port} outside valid range {_MIN_PORT}-{_MAX_PORT}"
            raise ValueError(msg)  # noqa: TRY301 - unify conversion and range errors
    except ValueError as exc:
        log_error(
            logger,
            "Invalid SPONSORHOOK_PORT value: %r (must be %d-%d): %s",
            port_str,
            _MIN_PORT,
            _MAX_PORT,
            exc,
        )
        raise SystemExit(1) from exc
    return port


def _load_config() -> RelayConfig:
    """Load relay configuration, exiting when a required value is missing."""
    try:
        return RelayConfig.from_env()
    except (MissingSecretError, ValueError) as exc:
        log_error(logger, "Invalid relay configuration: %s", exc)
        raise SystemExit(1) from exc


def create_app() -> falcon.asgi.App:
    """Create the Falcon ASGI application from environment configuration.

    Returns
    -------
    falcon.asgi.App
        Application relaying sponsorship webhooks to Discord.

    Raises
    ------
    SystemExit
        If the relay configuration is missing or invalid.

    """
    from sponsorhook.api.app import create_app as _create_api_app
    from sponsorhook.relay.notifier import DiscordNotifier
    from sponsorhook.relay.service import SponsorshipRelay

    config = _load_config()
    relay = SponsorshipRelay(config, DiscordNotifier(config))
    return _create_api_app(relay)


def main() -> None:
    """Start the Sponsorhook server using Granian.

    Reads ``SPONSORHOOK_HOST``, ``SPONSORHOOK_PORT``, and
    ``SPONSORHOOK_LOG_LEVEL`` from the environment and starts the ASGI
    server.
    """
    from granian import Granian
    from granian.constants import Interfaces

    host = os.environ.get("SPONSORHOOK_HOST", "0.0.0.0")  # noqa: S104 - bind all interfaces for container
    port = _parse_port(os.environ.get("SPONSORHOOK_PORT", "8080"))
    log_level_str = os.environ.get("SPONSORHOOK_LOG_LEVEL", "INFO")

    normalized_level, invalid_level = configure_logging(log_level_str)
    if invalid_level:
        log_warning(
            logger,
            "Invalid SPONSORHOOK_LOG_LEVEL %r, falling back to %s",
            log_level_str,
            normalized_level,
        )

    # Fail before binding the port when the relay cannot be configured.
    _load_config()

    log_info(
        logger,
        "Starting Sponsorhook on %s:%d (log_level=%s)",
        host,
        port,
        normalized_level,
    )

    server = Granian(
        "sponsorhook.runtime:create_app",
        address=host,
        port=port,
        interface=Interfaces.ASGI,
        factory=True,
    )
    server.serve()


if __name__ == "__main__":
    main()
