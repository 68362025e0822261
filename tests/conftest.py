"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import pytest

from sponsorhook.relay import RelayConfig
from sponsorhook.relay import observability as relay_observability
from tests.helpers.fakes import DiscordStub, FakeNotifier
from tests.helpers.log_capture import RecordingLogger
from tests.helpers.webhook_builders import TEST_SECRET, TEST_WEBHOOK_URL


@pytest.fixture
def relay_config() -> RelayConfig:
    """Return a configuration using the test secret and webhook URL."""
    return RelayConfig(github_secret=TEST_SECRET, discord_webhook_url=TEST_WEBHOOK_URL)


@pytest.fixture
def fake_notifier() -> FakeNotifier:
    """Return a notifier that records messages."""
    return FakeNotifier()


@pytest.fixture
def discord_stub() -> DiscordStub:
    """Return a Discord webhook stub answering 204."""
    return DiscordStub()


@pytest.fixture
def relay_logs(monkeypatch: pytest.MonkeyPatch) -> RecordingLogger:
    """Record relay observability events for assertions."""
    recorder = RecordingLogger()
    monkeypatch.setattr(relay_observability, "logger", recorder)
    return recorder
