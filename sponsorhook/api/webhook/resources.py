"""Falcon resource receiving GitHub sponsorship webhook deliveries.

Usage
-----
Register the resource as a catch-all sink::

    webhook = SponsorWebhookResource(relay)
    app.add_sink(webhook.on_delivery, prefix="/")

"""

from __future__ import annotations

import typing as typ
from http import HTTPStatus

from sponsorhook.relay.reader import read_body

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

    from sponsorhook.relay.service import SponsorshipRelay

__all__ = ["SponsorWebhookResource"]


class SponsorWebhookResource:
    """Read each delivery, pass it to the relay and answer ``200``.

    Failures propagate as :class:`~sponsorhook.relay.errors.RelayError` and
    are answered by the handler registered in :mod:`sponsorhook.api.errors`.

    """

    def __init__(self, relay: SponsorshipRelay) -> None:
        """Configure the resource with the relay that handles deliveries.

        Parameters
        ----------
        relay
            Relay pipeline shared by all requests.

        """
        self._relay = relay

    async def on_delivery(
        self,
        req: Request,
        resp: Response,
        **_params: typ.Any,  # noqa: ANN401 - Falcon passes sink regex groups
    ) -> None:
        """Handle a delivery on any method and path.

        Parameters
        ----------
        req
            Falcon request carrying the webhook delivery.
        resp
            Falcon response; left with an empty body.
        _params
            Named groups from the sink prefix (unused).

        """
        body = await read_body(req)
        await self._relay.handle(req.get_header, body)
        resp.status = HTTPStatus.OK
        resp.data = b""
