"""Lifespan middleware that releases the notifier's HTTP client.

Usage
-----
Register the middleware when creating the Falcon app::

    app = falcon.asgi.App(middleware=[NotifierLifespan(notifier)])

"""

from __future__ import annotations

import typing as typ

from sponsorhook.logging import get_logger, log_info

if typ.TYPE_CHECKING:
    from sponsorhook.relay.notifier import SponsorNotifier

__all__ = ["NotifierLifespan"]

logger = get_logger(__name__)


class NotifierLifespan:
    """Falcon middleware closing the notifier on ASGI lifespan shutdown.

    Parameters
    ----------
    notifier
        Notifier whose resources are released when the server stops.

    """

    def __init__(self, notifier: SponsorNotifier) -> None:
        """Initialise the middleware with the notifier to close."""
        self._notifier = notifier

    async def process_shutdown(
        self,
        _scope: dict[str, typ.Any],
        _event: dict[str, typ.Any],
    ) -> None:
        """Close the notifier when the ASGI server shuts down."""
        await self._notifier.aclose()
        log_info(logger, "Notifier closed on shutdown")
