"""Discord notification for new sponsors.

The message is a plain value (:class:`NotificationMessage`) rendered into
Discord's webhook JSON by :meth:`NotificationMessage.to_payload`, then posted
by :class:`DiscordNotifier`. Mention parsing is disabled on every message so
a sponsor handle can never ping a channel or role.
"""

from __future__ import annotations

import typing as typ

import httpx
import msgspec

from sponsorhook.relay.config import DISCORD_WEBHOOK_URL_ENV
from sponsorhook.relay.errors import DeliveryError, MissingSecretError

if typ.TYPE_CHECKING:
    from sponsorhook.relay.config import RelayConfig

NOTIFICATION_TITLE = "New Sponsor!"
NOTIFICATION_FOOTER = "Sponsorship Notifications"
COLOR_SUCCESS = 0x00FF00


class NotificationMessage(msgspec.Struct, kw_only=True, frozen=True):
    """A single-embed Discord message.

    Attributes
    ----------
    title
        Embed title.
    description
        Markdown body of the embed.
    color
        Embed accent color as a 24-bit RGB integer.
    footer
        Footer label.
    suppress_mentions
        When True, Discord resolves no @-mentions in the message.

    """

    title: str
    description: str
    color: int
    footer: str
    suppress_mentions: bool = True

    def to_payload(self) -> dict[str, typ.Any]:
        """Render the message as a Discord webhook request body."""
        payload: dict[str, typ.Any] = {
            "embeds": [
                {
                    "title": self.title,
                    "description": self.description,
                    "color": self.color,
                    "footer": {"text": self.footer},
                }
            ],
        }
        if self.suppress_mentions:
            payload["allowed_mentions"] = {"parse": []}
        return payload


def build_sponsor_message(
    login: str, profile_url: str, amount_usd: int
) -> NotificationMessage:
    """Build the announcement for a new sponsor.

    Parameters
    ----------
    login
        Sponsor's GitHub handle.
    profile_url
        Sponsor's profile URL, linked from the handle.
    amount_usd
        Monthly tier price in whole dollars.

    Returns
    -------
    NotificationMessage
        Message ready for delivery.

    """
    return NotificationMessage(
        title=NOTIFICATION_TITLE,
        description=f"[{login}]({profile_url}) just donated ${amount_usd}!",
        color=COLOR_SUCCESS,
        footer=NOTIFICATION_FOOTER,
    )


class SponsorNotifier(typ.Protocol):
    """Destination for new-sponsor announcements."""

    async def notify(self, message: NotificationMessage) -> None:
        """Deliver ``message`` or raise :class:`DeliveryError`."""
        ...

    async def aclose(self) -> None:
        """Release any resources held by the notifier."""
        ...


class DiscordNotifier:
    """Post notifications to a Discord webhook.

    Parameters
    ----------
    config
        Relay configuration supplying the webhook URL and timeout.
    http_client
        Optional ``httpx.AsyncClient``. When omitted the notifier creates
        and owns its own client.

    """

    def __init__(
        self,
        config: RelayConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialise the notifier with configuration."""
        self._webhook_url = config.discord_webhook_url
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=config.timeout_s,
            headers={"User-Agent": config.user_agent},
        )

    async def aclose(self) -> None:
        """Close the HTTP client if this notifier created it."""
        if self._owns_client:
            await self._client.aclose()

    async def notify(self, message: NotificationMessage) -> None:
        """Send ``message`` to the configured webhook.

        Raises
        ------
        MissingSecretError
            If no webhook URL is configured.
        DeliveryError
            If the request times out, fails in transport, or the webhook
            answers with any non-2xx status, redirects included.

        """
        if not self._webhook_url:
            raise MissingSecretError(DISCORD_WEBHOOK_URL_ENV)

        response = await self._send_request(message.to_payload())
        if not response.is_success:
            raise DeliveryError.http_error(response.status_code)

    async def _send_request(self, payload: dict[str, typ.Any]) -> httpx.Response:
        try:
            return await self._client.post(self._webhook_url, json=payload)
        except httpx.TimeoutException as exc:
            raise DeliveryError.timeout() from exc
        except httpx.RequestError as exc:
            raise DeliveryError.network_error(type(exc).__name__) from exc


__all__ = [
    "COLOR_SUCCESS",
    "NOTIFICATION_FOOTER",
    "NOTIFICATION_TITLE",
    "DiscordNotifier",
    "NotificationMessage",
    "SponsorNotifier",
    "build_sponsor_message",
]
