"""HMAC-SHA256 verification of GitHub webhook deliveries.

GitHub signs each delivery with the shared secret and sends
``sha256=<hex digest>`` in ``X-Hub-Signature-256``. Verification recomputes
that value over the raw body and compares the two as bytes, in constant
time, before anything in the body is trusted.
"""

from __future__ import annotations

import hashlib
import hmac

from sponsorhook.relay.config import GITHUB_SECRET_ENV
from sponsorhook.relay.errors import (
    InvalidSignatureError,
    MissingHeaderError,
    MissingSecretError,
)

SIGNATURE_HEADER = "X-Hub-Signature-256"
SIGNATURE_PREFIX = "sha256="


def compute_signature(body: bytes, secret: str) -> str:
    """Return the ``sha256=``-prefixed hex HMAC of ``body`` under ``secret``."""
    digest = hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()
    return f"{SIGNATURE_PREFIX}{digest}"


def verify_signature(body: bytes, signature: str | None, secret: str | None) -> None:
    """Check that ``signature`` is GitHub's signature of ``body``.

    Parameters
    ----------
    body
        Raw request body.
    signature
        Value of the ``X-Hub-Signature-256`` header, or ``None`` when the
        header was not sent.
    secret
        Shared webhook secret.

    Raises
    ------
    MissingHeaderError
        If ``signature`` is ``None``.
    MissingSecretError
        If ``secret`` is ``None`` or empty.
    InvalidSignatureError
        If the computed value differs from ``signature`` in any byte,
        including letter case.

    """
    if signature is None:
        raise MissingHeaderError(SIGNATURE_HEADER)
    if not secret:
        raise MissingSecretError(GITHUB_SECRET_ENV)

    expected = compute_signature(body, secret).encode("ascii")
    # Falcon decodes header values as latin-1; undo that to get the wire bytes.
    received = signature.encode("latin-1", errors="replace")
    if not hmac.compare_digest(expected, received):
        raise InvalidSignatureError.mismatch()


__all__ = [
    "SIGNATURE_HEADER",
    "SIGNATURE_PREFIX",
    "compute_signature",
    "verify_signature",
]
