"""Slack Web API adapter."""

from slackfeed.adapters.slack.client import SlackAPIError, SlackClient

__all__ = ["SlackAPIError", "SlackClient"]
