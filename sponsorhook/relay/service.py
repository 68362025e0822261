"""The sponsorship relay pipeline.

One call to :meth:`SponsorshipRelay.handle` takes a delivery through
verify, classify, parse and (for new sponsorships) notify. Any step may
raise a :class:`~sponsorhook.relay.errors.RelayError`, which ends the
pipeline immediately; no later step runs after a failure.

Usage
-----
Run one delivery from inside a request handler::

    relay = SponsorshipRelay(config, DiscordNotifier(config))
    outcome = await relay.handle(req.get_header, body)

"""

from __future__ import annotations

import enum
import typing as typ

from sponsorhook.relay.models import EVENT_HEADER, decode_event, is_ping_event
from sponsorhook.relay.notifier import build_sponsor_message
from sponsorhook.relay.observability import RelayEventLogger
from sponsorhook.relay.signature import SIGNATURE_HEADER, verify_signature

if typ.TYPE_CHECKING:
    from sponsorhook.relay.config import RelayConfig
    from sponsorhook.relay.notifier import SponsorNotifier

HeaderLookup = typ.Callable[[str], str | None]


class RelayOutcome(enum.StrEnum):
    """How a verified delivery was handled."""

    PING = "ping"
    NOTIFIED = "notified"
    IGNORED = "ignored"


class SponsorshipRelay:
    """Verify GitHub sponsorship deliveries and announce new sponsors.

    Parameters
    ----------
    config
        Relay configuration; only the signing secret is read here.
    notifier
        Destination for new-sponsor messages.
    event_logger
        Optional event logger; a default :class:`RelayEventLogger` is used
        when omitted.

    """

    def __init__(
        self,
        config: RelayConfig,
        notifier: SponsorNotifier,
        *,
        event_logger: RelayEventLogger | None = None,
    ) -> None:
        """Store collaborators; the relay holds no per-request state."""
        self._secret = config.github_secret
        self._notifier = notifier
        self._event_logger = event_logger or RelayEventLogger()

    @property
    def notifier(self) -> SponsorNotifier:
        """Return the notifier new-sponsor messages are sent to."""
        return self._notifier

    @property
    def event_logger(self) -> RelayEventLogger:
        """Return the logger used for pipeline events."""
        return self._event_logger

    async def handle(self, get_header: HeaderLookup, body: bytes) -> RelayOutcome:
        """Run one delivery through the pipeline.

        Parameters
        ----------
        get_header
            Case-insensitive header lookup returning ``None`` when absent,
            such as ``falcon.asgi.Request.get_header``.
        body
            Raw request body.

        Returns
        -------
        RelayOutcome
            ``PING`` for liveness checks, ``NOTIFIED`` when a new sponsor
            was announced, ``IGNORED`` for any other action.

        Raises
        ------
        RelayError
            Subclass identifying the step that failed.

        """
        verify_signature(body, get_header(SIGNATURE_HEADER), self._secret)

        event_name = get_header(EVENT_HEADER)
        if is_ping_event(event_name):
            self._event_logger.log_ping()
            return RelayOutcome.PING

        event = decode_event(body)
        if not event.is_created:
            self._event_logger.log_ignored(event_name=event_name, action=event.action)
            return RelayOutcome.IGNORED

        sponsor = event.sponsorship.sponsor
        amount = event.sponsorship.tier.monthly_price_in_dollars
        await self._notifier.notify(
            build_sponsor_message(sponsor.login, sponsor.html_url, amount)
        )
        self._event_logger.log_notified(login=sponsor.login, amount_usd=amount)
        return RelayOutcome.NOTIFIED


__all__ = ["HeaderLookup", "RelayOutcome", "SponsorshipRelay"]
