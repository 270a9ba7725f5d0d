"""Slack Feed — recent channel messages as HTML or JSON."""

from slackfeed.config import CONFIG, AppConfig
from slackfeed.domain import (
    HTML_VIEW,
    JSON_VIEW,
    FeedView,
    MissingProfile,
    RenderedItem,
    assemble,
    convert_emoji,
    parse,
    render_node,
)
from slackfeed.ports import GatewayError
from slackfeed.adapters.slack.client import SlackAPIError, SlackClient

__all__ = [
    "CONFIG",
    "AppConfig",
    "HTML_VIEW",
    "JSON_VIEW",
    "FeedView",
    "MissingProfile",
    "RenderedItem",
    "assemble",
    "convert_emoji",
    "parse",
    "render_node",
    "GatewayError",
    "SlackAPIError",
    "SlackClient",
]
