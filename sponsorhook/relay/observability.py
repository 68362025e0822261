"""Structured log events for relayed webhook deliveries.

Each request produces exactly one event: an acknowledged ping, an ignored
action, a delivered notification, or a rejection tagged with its
:class:`~sponsorhook.relay.errors.ErrorKind`. Rejections are distinguishable
here even though the HTTP response carries no detail.
"""

from __future__ import annotations

import enum
import typing as typ

from sponsorhook.logging import get_logger, log_exception, log_info, log_warning

if typ.TYPE_CHECKING:
    from sponsorhook.relay.errors import RelayError

logger = get_logger(__name__)

_HTTP_SERVER_ERROR_THRESHOLD = 500


class RelayEventType(enum.StrEnum):
    """Structured log event types for the relay pipeline."""

    PING_ACKNOWLEDGED = "relay.ping.acknowledged"
    EVENT_IGNORED = "relay.event.ignored"
    SPONSOR_NOTIFIED = "relay.sponsor.notified"
    REQUEST_REJECTED = "relay.request.rejected"


class RelayEventLogger:
    """Emit relay events via femtologging."""

    def log_ping(self) -> None:
        """Log an acknowledged GitHub ping."""
        log_info(logger, "[%s]", RelayEventType.PING_ACKNOWLEDGED)

    def log_ignored(self, *, event_name: str | None, action: str) -> None:
        """Log a verified event whose action needs no notification."""
        log_info(
            logger,
            "[%s] event=%s action=%s",
            RelayEventType.EVENT_IGNORED,
            event_name,
            action,
        )

    def log_notified(self, *, login: str, amount_usd: int) -> None:
        """Log a delivered new-sponsor notification."""
        log_info(
            logger,
            "[%s] sponsor=%s monthly_price_in_dollars=%d",
            RelayEventType.SPONSOR_NOTIFIED,
            login,
            amount_usd,
        )

    def log_rejected(self, error: RelayError, *, status_code: int) -> None:
        """Log a failed request with its error kind and response status.

        Server-side failures are logged at ERROR with the error attached as
        exception info; client faults such as a bad signature are logged at
        WARNING.

        Parameters
        ----------
        error
            The relay error that ended the request.
        status_code
            HTTP status returned to the caller.

        """
        template = "[%s] kind=%s status_code=%d error=%s"
        args = (RelayEventType.REQUEST_REJECTED, error.kind, status_code, error)
        if status_code >= _HTTP_SERVER_ERROR_THRESHOLD:
            log_exception(logger, template % args, error)
        else:
            log_warning(logger, template, *args)


__all__ = ["RelayEventLogger", "RelayEventType"]
