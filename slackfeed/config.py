"""Configuration and shared settings."""

__version__ = "0.1.0"

import json
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default


def load_credentials_file(path: str) -> Dict[str, str]:
    """Read a JSON credentials file with ``slacktoken`` / ``channelid`` keys.

    Returns an empty dict when the path is blank or unreadable.
    """
    if not path:
        return {}
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        _stderr_print(f"Failed to read credentials file {path!r}: {e}")
        return {}
    if not isinstance(raw, dict):
        return {}
    return {
        "slack_token": str(raw.get("slacktoken", "") or ""),
        "slack_channel_id": str(raw.get("channelid", "") or ""),
    }


_credentials = load_credentials_file(os.getenv("SLACK_CREDENTIALS_FILE", "").strip())

CONFIG = {
    "port": _env_int("PORT", 3000),
    # Slack Web API
    "slack_token": os.getenv("SLACK_TOKEN", "").strip() or _credentials.get("slack_token", ""),
    "slack_channel_id": os.getenv("SLACK_CHANNEL_ID", "").strip()
    or _credentials.get("slack_channel_id", ""),
    "slack_timeout_seconds": _env_float("SLACK_TIMEOUT_SECONDS", 5.0),
    "slack_history_limit": _env_int("SLACK_HISTORY_LIMIT", 20),
    # Feed views
    "html_max_messages": _env_int("SLACKFEED_HTML_MAX_MESSAGES", 15),
    "json_max_messages": _env_int("SLACKFEED_JSON_MAX_MESSAGES", 20),
}


# ── Typed config ────────────────────────────────────────────


@dataclass
class SlackConfig:
    token: str = ""
    channel_id: str = ""
    timeout_seconds: float = 5.0
    history_limit: int = 20


@dataclass
class FeedConfig:
    html_max_messages: int = 15
    json_max_messages: int = 20


@dataclass
class AppConfig:
    """Typed view over CONFIG."""

    port: int = 3000
    slack: SlackConfig = field(default_factory=SlackConfig)
    feed: FeedConfig = field(default_factory=FeedConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            port=CONFIG["port"],
            slack=SlackConfig(
                token=CONFIG["slack_token"],
                channel_id=CONFIG["slack_channel_id"],
                timeout_seconds=CONFIG["slack_timeout_seconds"],
                history_limit=CONFIG["slack_history_limit"],
            ),
            feed=FeedConfig(
                html_max_messages=CONFIG["html_max_messages"],
                json_max_messages=CONFIG["json_max_messages"],
            ),
        )
