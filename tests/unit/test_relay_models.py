"""Unit tests for sponsorship payload decoding."""

from __future__ import annotations

import json

import pytest

from sponsorhook.relay.errors import InvalidPayloadError
from sponsorhook.relay.models import (
    SponsorshipEvent,
    decode_event,
    is_ping_event,
)
from tests.helpers.webhook_builders import (
    SponsorshipSpec,
    sponsorship_body,
    sponsorship_payload,
)


class TestDecodeEvent:
    """Tests for decode_event."""

    def test_decodes_required_fields(self) -> None:
        """Sponsor and tier fields are extracted from the payload."""
        event = decode_event(sponsorship_body())

        assert isinstance(event, SponsorshipEvent)
        assert event.action == "created"
        assert event.sponsorship.sponsor.login == "alice"
        assert event.sponsorship.sponsor.html_url == "https://github.com/alice"
        assert event.sponsorship.tier.monthly_price_in_dollars == 10

    def test_decodes_minimal_payload(self) -> None:
        """The compact payload with only modelled fields decodes."""
        body = (
            b'{"action":"created","sponsorship":{"sponsor":{"login":"alice",'
            b'"html_url":"https://github.com/alice"},'
            b'"tier":{"monthly_price_in_dollars":10}}}'
        )
        event = decode_event(body)
        assert event.sponsorship.tier.monthly_price_in_dollars == 10

    def test_negative_price_is_accepted(self) -> None:
        """Prices are not range-checked."""
        event = decode_event(
            sponsorship_body(SponsorshipSpec(monthly_price_in_dollars=-5))
        )
        assert event.sponsorship.tier.monthly_price_in_dollars == -5

    @pytest.mark.parametrize(
        ("action", "expected"),
        [("created", True), ("cancelled", False), ("Created", False)],
    )
    def test_is_created(self, action: str, *, expected: bool) -> None:
        """Only the exact 'created' action counts as new."""
        event = decode_event(sponsorship_body(SponsorshipSpec(action=action)))
        assert event.is_created is expected

    @pytest.mark.parametrize(
        "body",
        [
            b"",
            b"not json",
            b'{"action": "created"',
            b"[]",
            b'{"action": "created"}',
            b'{"sponsorship": {}}',
        ],
        ids=["empty", "text", "truncated", "array", "no-sponsorship", "no-action"],
    )
    def test_rejects_malformed_body(self, body: bytes) -> None:
        """Bodies that are not sponsorship events raise InvalidPayloadError."""
        with pytest.raises(InvalidPayloadError):
            decode_event(body)

    def test_rejects_missing_nested_field(self) -> None:
        """A sponsor without html_url is rejected."""
        payload = sponsorship_payload()
        del payload["sponsorship"]["sponsor"]["html_url"]
        with pytest.raises(InvalidPayloadError):
            decode_event(json.dumps(payload).encode())

    def test_rejects_non_integer_price(self) -> None:
        """A string price is a shape mismatch."""
        payload = sponsorship_payload()
        payload["sponsorship"]["tier"]["monthly_price_in_dollars"] = "10"
        with pytest.raises(InvalidPayloadError):
            decode_event(json.dumps(payload).encode())


class TestIsPingEvent:
    """Tests for is_ping_event."""

    @pytest.mark.parametrize(
        ("event_name", "expected"),
        [
            ("ping", True),
            ("sponsorship", False),
            ("Ping", False),
            (" ping", False),
            ("", False),
            (None, False),
        ],
    )
    def test_exact_match(self, event_name: str | None, *, expected: bool) -> None:
        """Only the literal 'ping' is a liveness check."""
        assert is_ping_event(event_name) is expected
