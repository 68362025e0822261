"""Resources for liveness and readiness checks.

The checks are stateless and never touch the relay, so they answer even
while the chat webhook is unreachable.

Usage
-----
Register the checks on the Falcon app::

    app.add_route("/health", HealthResource())
    app.add_route("/ready", ReadyResource())

"""

from __future__ import annotations

import typing as typ
from http import HTTPStatus

import falcon

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

__all__ = ["HealthResource", "ReadyResource"]


class _HealthCheckResource:
    """Answer ``GET`` with ``{"status": <check status>}`` and HTTP 200."""

    check_status: typ.ClassVar[str]

    async def on_get(self, _req: Request, resp: Response) -> None:
        """Handle a health check request."""
        resp.content_type = falcon.MEDIA_JSON
        resp.media = {"status": self.check_status}
        resp.status = HTTPStatus.OK


class HealthResource(_HealthCheckResource):
    """Liveness check returning ``{"status": "ok"}``."""

    check_status = "ok"


class ReadyResource(_HealthCheckResource):
    """Readiness check returning ``{"status": "ready"}``.

    Configuration is validated before the app is built, so a running
    process is always ready to accept deliveries.

    """

    check_status = "ready"
