"""Sponsorhook HTTP API layer.

This package provides the Falcon Asynchronous Server Gateway Interface
(ASGI) application that receives GitHub webhook deliveries.

Usage
-----
Create the application around a configured relay::

    from sponsorhook.api import create_app

    app = create_app(relay)

Public API
----------
create_app
    Application factory that registers the webhook sink, the
    health checks and the relay error handler.
"""

from sponsorhook.api.app import create_app

__all__ = ["create_app"]
