"""Errors raised while relaying a sponsorship webhook.

Every failure in the pipeline is one of a closed set of kinds. Each kind is
terminal for the request that raised it; the HTTP layer maps the kind to a
status code and the event logger records it, but nothing is retried.
Messages never include the secret, the signature or the request body.
"""

from __future__ import annotations

import enum


class ErrorKind(enum.StrEnum):
    """Tag identifying which pipeline step rejected a request."""

    BODY_READ = "body_read"
    MISSING_HEADER = "missing_header"
    MISSING_SECRET = "missing_secret"
    INVALID_SIGNATURE = "invalid_signature"
    INVALID_PAYLOAD = "invalid_payload"
    DELIVERY = "delivery"


class RelayError(Exception):
    """Base class for relay failures.

    Attributes
    ----------
    kind
        The :class:`ErrorKind` of the concrete subclass.

    """

    kind: ErrorKind


class BodyReadError(RelayError):
    """Raised when the transport cannot deliver the full request body."""

    kind = ErrorKind.BODY_READ

    @classmethod
    def truncated(cls, *, expected: int, received: int) -> BodyReadError:
        """Return an error for a body shorter or longer than Content-Length."""
        return cls(f"request body truncated: expected {expected} bytes, got {received}")

    @classmethod
    def transport_fault(cls, detail: str) -> BodyReadError:
        """Return an error for a stream that failed while being read."""
        return cls(f"request body could not be read: {detail}")


class MissingHeaderError(RelayError):
    """Raised when a required request header is absent."""

    kind = ErrorKind.MISSING_HEADER

    def __init__(self, header: str) -> None:
        """Initialise with the name of the missing header."""
        self.header = header
        super().__init__(f"missing required header: {header}")


class MissingSecretError(RelayError):
    """Raised when a required configuration value is not set."""

    kind = ErrorKind.MISSING_SECRET

    def __init__(self, variable: str) -> None:
        """Initialise with the environment variable that should hold the value."""
        self.variable = variable
        super().__init__(f"{variable} is not configured")


class InvalidSignatureError(RelayError):
    """Raised when the computed HMAC does not match the signature header."""

    kind = ErrorKind.INVALID_SIGNATURE

    @classmethod
    def mismatch(cls) -> InvalidSignatureError:
        """Return an error for a signature that does not match the body."""
        return cls("signature does not match request body")


class InvalidPayloadError(RelayError):
    """Raised when a verified body is not a well-formed sponsorship event."""

    kind = ErrorKind.INVALID_PAYLOAD

    @classmethod
    def undecodable(cls, detail: str) -> InvalidPayloadError:
        """Return an error wrapping the decoder's description of the fault."""
        return cls(f"invalid sponsorship payload: {detail}")


class DeliveryError(RelayError):
    """Raised when the chat webhook cannot be reached or rejects the message.

    Attributes
    ----------
    status_code
        HTTP status returned by the chat webhook, when one was received.

    """

    kind = ErrorKind.DELIVERY

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        """Initialise with a message and optional HTTP status code."""
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def http_error(cls, status_code: int) -> DeliveryError:
        """Return an error for a non-2xx webhook response."""
        return cls(f"chat webhook returned HTTP {status_code}", status_code=status_code)

    @classmethod
    def timeout(cls) -> DeliveryError:
        """Return an error for a webhook call that timed out."""
        return cls("chat webhook request timed out")

    @classmethod
    def network_error(cls, detail: str) -> DeliveryError:
        """Return an error for a webhook call that failed in transport."""
        return cls(f"chat webhook unreachable: {detail}")


__all__ = [
    "BodyReadError",
    "DeliveryError",
    "ErrorKind",
    "InvalidPayloadError",
    "InvalidSignatureError",
    "MissingHeaderError",
    "MissingSecretError",
    "RelayError",
]
