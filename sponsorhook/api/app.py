"""Application factory for the Sponsorhook Falcon ASGI application.

The webhook resource is registered as a sink on ``/`` so every method and
path reaches the relay. ``GET /health`` and ``GET /ready`` are ordinary
routes, which Falcon matches before any sink.
Responses get no default ``Content-Type``, so the empty relay answers carry
no media type at all.

Usage
-----
Build the app around a relay::

    from sponsorhook.api.app import create_app

    app = create_app(relay)

"""

from __future__ import annotations

import typing as typ

import falcon.asgi

from sponsorhook.api.errors import make_relay_error_handler
from sponsorhook.api.health.resources import HealthResource, ReadyResource
from sponsorhook.api.middleware import NotifierLifespan
from sponsorhook.api.webhook.resources import SponsorWebhookResource
from sponsorhook.relay.errors import RelayError

if typ.TYPE_CHECKING:
    from sponsorhook.relay.service import SponsorshipRelay

__all__ = ["create_app"]


def create_app(relay: SponsorshipRelay) -> falcon.asgi.App:
    """Create and configure the Falcon ASGI application.

    Parameters
    ----------
    relay
        Configured relay that handles every webhook delivery.

    Returns
    -------
    falcon.asgi.App
        Configured Falcon ASGI application.

    """
    app = falcon.asgi.App(middleware=[NotifierLifespan(relay.notifier)])  # type: ignore[no-matching-overload]  # Falcon stubs
    # Relay responses are empty; only the health checks declare a media type.
    app.resp_options.default_media_type = None  # type: ignore[assignment]  # Falcon stubs

    app.add_route("/health", HealthResource())
    app.add_route("/ready", ReadyResource())

    webhook = SponsorWebhookResource(relay)
    app.add_sink(webhook.on_delivery, prefix="/")

    app.add_error_handler(RelayError, make_relay_error_handler(relay.event_logger))

    return app
