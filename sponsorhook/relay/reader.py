"""Read the raw webhook body exactly as it arrived on the wire.

The signature covers the bytes GitHub sent, so the body is never decoded,
re-encoded or trimmed before verification.
"""

from __future__ import annotations

import typing as typ

import falcon

from sponsorhook.relay.errors import BodyReadError

if typ.TYPE_CHECKING:
    from falcon.asgi import Request


async def read_body(req: Request) -> bytes:
    """Return the complete request body.

    Parameters
    ----------
    req
        Falcon ASGI request for the inbound webhook delivery.

    Returns
    -------
    bytes
        The body bytes, unchanged.

    Raises
    ------
    BodyReadError
        If the stream fails while being read, the Content-Length header is
        malformed, or fewer bytes arrive than Content-Length announced.

    """
    try:
        expected = req.content_length
        body = await req.stream.read()
    except falcon.HTTPInvalidHeader as exc:
        raise BodyReadError.transport_fault("malformed Content-Length") from exc
    except (OSError, ValueError) as exc:
        raise BodyReadError.transport_fault(type(exc).__name__) from exc

    if expected is not None and len(body) != expected:
        raise BodyReadError.truncated(expected=expected, received=len(body))
    return bytes(body)


__all__ = ["read_body"]
