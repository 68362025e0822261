"""Verification, parsing and notification for GitHub sponsorship webhooks."""

from .config import RelayConfig
from .errors import (
    BodyReadError,
    DeliveryError,
    ErrorKind,
    InvalidPayloadError,
    InvalidSignatureError,
    MissingHeaderError,
    MissingSecretError,
    RelayError,
)
from .models import Sponsor, Sponsorship, SponsorshipEvent, Tier, decode_event
from .notifier import (
    DiscordNotifier,
    NotificationMessage,
    SponsorNotifier,
    build_sponsor_message,
)
from .reader import read_body
from .service import RelayOutcome, SponsorshipRelay
from .signature import compute_signature, verify_signature

__all__ = [
    "BodyReadError",
    "DeliveryError",
    "DiscordNotifier",
    "ErrorKind",
    "InvalidPayloadError",
    "InvalidSignatureError",
    "MissingHeaderError",
    "MissingSecretError",
    "NotificationMessage",
    "RelayConfig",
    "RelayError",
    "RelayOutcome",
    "Sponsor",
    "SponsorNotifier",
    "Sponsorship",
    "SponsorshipEvent",
    "SponsorshipRelay",
    "Tier",
    "build_sponsor_message",
    "compute_signature",
    "decode_event",
    "read_body",
    "verify_signature",
]
