"""Shared fixtures for socketwatch tests (no network required)."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from socketwatch.config import Settings
from socketwatch.core.socket_client import SocketClient
from socketwatch.engines.notification.notifier import SlackNotifier


@pytest.fixture
def settings() -> Settings:
    return Settings(
        api_key="test-key",
        webhook_url="https://hooks.slack.test/services/T/B/X",
        poll_interval=0.01,
        severity="high",
        batch_size=10,
        batch_delay=0,
    )


@pytest.fixture
def client():
    """A SocketClient double; tests set search/lookup behaviour."""
    mock = AsyncMock(spec=SocketClient)
    mock.search_dependencies.return_value = {"rows": [], "end": True, "limit": 1000}
    mock.lookup_purls.return_value = ""
    return mock


@pytest.fixture
def notifier():
    mock = AsyncMock(spec=SlackNotifier)
    mock.configured = True
    mock.notify.return_value = "sent"
    return mock
