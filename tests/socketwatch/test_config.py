"""Tests for environment-driven configuration."""

from __future__ import annotations

import pytest

from socketwatch.config import WEBHOOK_PLACEHOLDER, load_settings, split_csv
from socketwatch.errors import ConfigError


class TestSplitCsv:
    def test_none_and_empty(self):
        assert split_csv(None) is None
        assert split_csv("") is None

    def test_strips_and_drops_blanks(self):
        assert split_csv(" web, api ,,") == frozenset({"web", "api"})

    def test_only_separators(self):
        assert split_csv(" , ,") is None


class TestLoadSettings:
    def test_defaults(self):
        s = load_settings({"SOCKET_KEY": "k"})
        assert s.api_key == "k"
        assert s.webhook_url is None
        assert s.poll_interval == 600.0
        assert s.severity == "high"
        assert s.repos is None
        assert s.categories is None
        assert s.batch_size == 10
        assert s.batch_delay == 1.0
        assert s.page_size == 1000
        assert s.request_timeout == 30.0

    def test_full_environment(self):
        s = load_settings(
            {
                "SOCKET_KEY": "k",
                "SLACK_WEBHOOK": "https://hooks.slack.test/x",
                "POLL_INTERVAL_MS": "5000",
                "SEVERITY_FILTER": "Medium",
                "REPO_FILTER": "web,api",
                "CATEGORY_FILTER": "vulnerability,malware",
                "SOCKET_API_URL": "https://socket.internal/v0/",
                "SOCKETWATCH_BATCH_DELAY": "0",
            }
        )
        assert s.webhook_url == "https://hooks.slack.test/x"
        assert s.poll_interval == 5.0
        assert s.severity == "medium"
        assert s.repos == frozenset({"web", "api"})
        assert s.categories == frozenset({"vulnerability", "malware"})
        assert s.api_url == "https://socket.internal/v0"
        assert s.batch_delay == 0

    def test_placeholder_webhook_means_unconfigured(self):
        s = load_settings({"SOCKET_KEY": "k", "SLACK_WEBHOOK": WEBHOOK_PLACEHOLDER})
        assert s.webhook_url is None

    def test_missing_key(self):
        with pytest.raises(ConfigError, match="SOCKET_KEY"):
            load_settings({})

    def test_unknown_severity(self):
        with pytest.raises(ConfigError, match="SEVERITY_FILTER"):
            load_settings({"SOCKET_KEY": "k", "SEVERITY_FILTER": "critical"})

    @pytest.mark.parametrize("value", ["soon", "-1", "0"])
    def test_invalid_interval(self, value):
        with pytest.raises(ConfigError, match="POLL_INTERVAL_MS"):
            load_settings({"SOCKET_KEY": "k", "POLL_INTERVAL_MS": value})

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            load_settings({"SOCKET_KEY": ""})

    @pytest.mark.parametrize("value", ["nan", "inf", "-inf"])
    @pytest.mark.parametrize("key", ["POLL_INTERVAL_MS", "SOCKETWATCH_TIMEOUT"])
    def test_non_finite_numbers(self, key, value):
        with pytest.raises(ConfigError, match=key):
            load_settings({"SOCKET_KEY": "k", key: value})

    @pytest.mark.parametrize("value", ["0.5", "2.0", "0", "-3", "ten", "nan", "inf"])
    @pytest.mark.parametrize("key", ["SOCKETWATCH_BATCH_SIZE", "SOCKETWATCH_PAGE_SIZE"])
    def test_invalid_sizes(self, key, value):
        with pytest.raises(ConfigError, match=key):
            load_settings({"SOCKET_KEY": "k", key: value})

    def test_sizes_parsed_as_int(self):
        s = load_settings(
            {"SOCKET_KEY": "k", "SOCKETWATCH_BATCH_SIZE": "25", "SOCKETWATCH_PAGE_SIZE": " 500 "}
        )
        assert s.batch_size == 25
        assert isinstance(s.batch_size, int)
        assert s.page_size == 500
