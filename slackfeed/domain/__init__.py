"""Domain layer — pure Python, no framework dependencies."""

from slackfeed.domain.models import EmojiEntry, Message, NodeType, Profile, RenderedItem
from slackfeed.domain.emoji import EMOJI_TABLE, EmojiTable, convert_emoji
from slackfeed.domain.markup_parser import parse
from slackfeed.domain.renderer import render_node, render_text
from slackfeed.domain.assembler import (
    HTML_VIEW,
    JSON_VIEW,
    FeedView,
    MissingProfile,
    assemble,
    index_profiles,
    select_messages,
)

__all__ = [
    "EmojiEntry",
    "Message",
    "NodeType",
    "Profile",
    "RenderedItem",
    "EMOJI_TABLE",
    "EmojiTable",
    "convert_emoji",
    "parse",
    "render_node",
    "render_text",
    "HTML_VIEW",
    "JSON_VIEW",
    "FeedView",
    "MissingProfile",
    "assemble",
    "index_profiles",
    "select_messages",
]
