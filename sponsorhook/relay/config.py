"""Process configuration for the sponsorship relay.

Configuration is loaded once at start-up and passed to the components that
need it; nothing reads the environment while a request is in flight.

Usage
-----
>>> import os
>>> os.environ["GITHUB_SECRET"] = "s3cret"
>>> os.environ["DISCORD_WEBHOOK_URL"] = "https://discord.test/api/webhooks/1/x"
>>> config = RelayConfig.from_env()
>>> config.timeout_s
10.0

"""

from __future__ import annotations

import dataclasses as dc
import os

from sponsorhook.relay.errors import MissingSecretError

GITHUB_SECRET_ENV = "GITHUB_SECRET"
DISCORD_WEBHOOK_URL_ENV = "DISCORD_WEBHOOK_URL"
DISCORD_TIMEOUT_ENV = "SPONSORHOOK_DISCORD_TIMEOUT_S"

_DEFAULT_TIMEOUT_S = 10.0
_DEFAULT_USER_AGENT = "sponsorhook/0.1"


@dc.dataclass(frozen=True, slots=True)
class RelayConfig:
    """Immutable settings shared by the verifier and the notifier.

    Attributes
    ----------
    github_secret
        Shared secret GitHub uses to sign webhook deliveries.
    discord_webhook_url
        Discord webhook that receives sponsor notifications.
    timeout_s
        Timeout applied to the outbound webhook call.
    user_agent
        User-Agent sent with the outbound webhook call.

    """

    github_secret: str
    discord_webhook_url: str
    timeout_s: float = _DEFAULT_TIMEOUT_S
    user_agent: str = _DEFAULT_USER_AGENT

    @staticmethod
    def _require(variable: str) -> str:
        # Blank counts as unset; the value itself is used verbatim.
        value = os.environ.get(variable, "")
        if not value.strip():
            raise MissingSecretError(variable)
        return value

    @staticmethod
    def _parse_timeout() -> float:
        raw = os.environ.get(DISCORD_TIMEOUT_ENV, "")
        if not raw.strip():
            return _DEFAULT_TIMEOUT_S
        try:
            value = float(raw)
        except ValueError as exc:
            msg = f"{DISCORD_TIMEOUT_ENV} must be a number, got: {raw!r}"
            raise ValueError(msg) from exc
        if value <= 0:
            msg = f"{DISCORD_TIMEOUT_ENV} must be positive, got: {value}"
            raise ValueError(msg)
        return value

    @classmethod
    def from_env(cls) -> RelayConfig:
        """Build configuration from environment variables.

        Reads the following environment variables:

        - ``GITHUB_SECRET``: Required webhook signing secret.
        - ``DISCORD_WEBHOOK_URL``: Required notification destination.
        - ``SPONSORHOOK_DISCORD_TIMEOUT_S``: Optional positive timeout in
          seconds for the outbound call.

        Returns
        -------
        RelayConfig
            Configuration populated from the environment.

        Raises
        ------
        MissingSecretError
            If a required variable is unset or blank.
        ValueError
            If the timeout is not a positive number.

        """
        return cls(
            github_secret=cls._require(GITHUB_SECRET_ENV),
            discord_webhook_url=cls._require(DISCORD_WEBHOOK_URL_ENV),
            timeout_s=cls._parse_timeout(),
        )


__all__ = [
    "DISCORD_TIMEOUT_ENV",
    "DISCORD_WEBHOOK_URL_ENV",
    "GITHUB_SECRET_ENV",
    "RelayConfig",
]
