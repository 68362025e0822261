"""Typed shape of GitHub ``sponsorship`` webhook payloads.

Only the fields the relay uses are modelled; every other key GitHub sends
is ignored during decoding. Decoding happens strictly after signature
verification.
"""

from __future__ import annotations

import msgspec

from sponsorhook.relay.errors import InvalidPayloadError

EVENT_HEADER = "X-GitHub-Event"
PING_EVENT = "ping"
ACTION_CREATED = "created"


class Sponsor(msgspec.Struct, kw_only=True, frozen=True):
    """The account that started the sponsorship.

    Attributes
    ----------
    login
        GitHub handle of the sponsor.
    html_url
        Profile URL of the sponsor.

    """

    login: str
    html_url: str


class Tier(msgspec.Struct, kw_only=True, frozen=True):
    """The sponsorship tier; the price is not range-checked."""

    monthly_price_in_dollars: int


class Sponsorship(msgspec.Struct, kw_only=True, frozen=True):
    """Sponsor and tier of a single sponsorship."""

    sponsor: Sponsor
    tier: Tier


class SponsorshipEvent(msgspec.Struct, kw_only=True, frozen=True):
    """A ``sponsorship`` webhook delivery.

    Attributes
    ----------
    action
        Lifecycle action, e.g. ``created`` or ``cancelled``.
    sponsorship
        The sponsorship the action applies to.

    """

    action: str
    sponsorship: Sponsorship

    @property
    def is_created(self) -> bool:
        """Return True for newly created sponsorships."""
        return self.action == ACTION_CREATED


_DECODER = msgspec.json.Decoder(SponsorshipEvent)


def is_ping_event(event_name: str | None) -> bool:
    """Return True when the ``X-GitHub-Event`` value is exactly ``ping``."""
    return event_name == PING_EVENT


def decode_event(body: bytes) -> SponsorshipEvent:
    """Decode a verified request body into a :class:`SponsorshipEvent`.

    Raises
    ------
    InvalidPayloadError
        If the body is not JSON or lacks a required field.

    """
    try:
        return _DECODER.decode(body)
    except msgspec.DecodeError as exc:
        raise InvalidPayloadError.undecodable(str(exc)) from exc


__all__ = [
    "ACTION_CREATED",
    "EVENT_HEADER",
    "PING_EVENT",
    "Sponsor",
    "Sponsorship",
    "SponsorshipEvent",
    "Tier",
    "decode_event",
    "is_ping_event",
]
