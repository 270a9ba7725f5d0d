"""Tests for the typed AppConfig dataclass and env helpers."""

import json

import pytest

from slackfeed.config import (
    CONFIG,
    AppConfig,
    FeedConfig,
    SlackConfig,
    _env_float,
    _env_int,
    load_credentials_file,
)


class TestSlackConfig:
    def test_defaults(self):
        c = SlackConfig()
        assert c.token == ""
        assert c.channel_id == ""
        assert c.timeout_seconds == 5.0
        assert c.history_limit == 20


class TestFeedConfig:
    def test_defaults(self):
        c = FeedConfig()
        assert c.html_max_messages == 15
        assert c.json_max_messages == 20

    def test_custom(self):
        c = FeedConfig(html_max_messages=5)
        assert c.html_max_messages == 5


class TestAppConfig:
    def test_defaults(self):
        c = AppConfig()
        assert c.port == 3000
        assert isinstance(c.slack, SlackConfig)
        assert isinstance(c.feed, FeedConfig)

    def test_from_env_mirrors_config(self):
        c = AppConfig.from_env()
        assert c.port == CONFIG["port"]
        assert c.slack.token == CONFIG["slack_token"]
        assert c.slack.channel_id == CONFIG["slack_channel_id"]
        assert c.feed.json_max_messages == CONFIG["json_max_messages"]

    def test_from_env_reads_patched_config(self, monkeypatch):
        monkeypatch.setitem(CONFIG, "html_max_messages", 7)
        assert AppConfig.from_env().feed.html_max_messages == 7


class TestEnvHelpers:
    def test_int_default_when_unset(self, monkeypatch):
        monkeypatch.delenv("SLACKFEED_TEST_INT", raising=False)
        assert _env_int("SLACKFEED_TEST_INT", 15) == 15

    def test_int_parsed(self, monkeypatch):
        monkeypatch.setenv("SLACKFEED_TEST_INT", "20")
        assert _env_int("SLACKFEED_TEST_INT", 15) == 20

    def test_int_invalid_falls_back(self, monkeypatch, capsys):
        monkeypatch.setenv("SLACKFEED_TEST_INT", "lots")
        assert _env_int("SLACKFEED_TEST_INT", 15) == 15
        assert "SLACKFEED_TEST_INT" in capsys.readouterr().err

    def test_float_parsed(self, monkeypatch):
        monkeypatch.setenv("SLACKFEED_TEST_FLOAT", "2.5")
        assert _env_float("SLACKFEED_TEST_FLOAT", 5.0) == 2.5


class TestCredentialsFile:
    def test_blank_path(self):
        assert load_credentials_file("") == {}

    def test_reads_keys(self, tmp_path):
        path = tmp_path / "credentials.json"
        path.write_text(json.dumps({"slacktoken": "xoxb-1", "channelid": "C1"}), encoding="utf-8")
        assert load_credentials_file(str(path)) == {
            "slack_token": "xoxb-1",
            "slack_channel_id": "C1",
        }

    def test_missing_file(self, tmp_path, capsys):
        assert load_credentials_file(str(tmp_path / "nope.json")) == {}
        assert "nope.json" in capsys.readouterr().err

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "credentials.json"
        path.write_text("[]", encoding="utf-8")
        assert load_credentials_file(str(path)) == {}
