"""Falcon error handling for relay failures.

Each :class:`~sponsorhook.relay.errors.ErrorKind` maps to one HTTP status.
Responses carry no body: GitHub only needs to know the delivery failed, and
the reason is recorded in the logs instead.

Usage
-----
Register the handler on the Falcon app::

    from sponsorhook.api.errors import make_relay_error_handler

    app.add_error_handler(RelayError, make_relay_error_handler(event_logger))

"""

from __future__ import annotations

import typing as typ
from http import HTTPStatus

from sponsorhook.relay.errors import ErrorKind, RelayError

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

    from sponsorhook.relay.observability import RelayEventLogger

__all__ = ["STATUS_BY_KIND", "make_relay_error_handler", "status_for"]

STATUS_BY_KIND: typ.Final[typ.Mapping[ErrorKind, HTTPStatus]] = {
    ErrorKind.BODY_READ: HTTPStatus.BAD_REQUEST,
    ErrorKind.MISSING_HEADER: HTTPStatus.BAD_REQUEST,
    ErrorKind.INVALID_PAYLOAD: HTTPStatus.BAD_REQUEST,
    ErrorKind.INVALID_SIGNATURE: HTTPStatus.UNAUTHORIZED,
    ErrorKind.MISSING_SECRET: HTTPStatus.INTERNAL_SERVER_ERROR,
    ErrorKind.DELIVERY: HTTPStatus.BAD_GATEWAY,
}


def status_for(error: RelayError) -> HTTPStatus:
    """Return the HTTP status reported for ``error``."""
    return STATUS_BY_KIND[error.kind]


ErrorHandler = typ.Callable[
    ["Request", "Response", RelayError, dict[str, typ.Any]],
    typ.Awaitable[None],
]


def make_relay_error_handler(event_logger: RelayEventLogger) -> ErrorHandler:
    """Build a Falcon error handler that logs and answers relay failures.

    Parameters
    ----------
    event_logger
        Logger that records each rejection with its error kind.

    Returns
    -------
    ErrorHandler
        Coroutine function suitable for ``App.add_error_handler``.

    """

    async def handle_relay_error(
        _req: Request,
        resp: Response,
        ex: RelayError,
        _params: dict[str, typ.Any],
    ) -> None:
        status = status_for(ex)
        event_logger.log_rejected(ex, status_code=status)
        resp.status = status
        resp.data = b""

    return handle_relay_error
