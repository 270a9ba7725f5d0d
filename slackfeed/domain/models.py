"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class NodeType(str, Enum):
    """Kinds of node in a parsed message tree."""

    ROOT = "root"
    TEXT = "text"
    BOLD = "bold"
    ITALIC = "italic"
    STRIKE = "strike"
    CODE = "code"
    PRE_TEXT = "pre_text"
    QUOTE = "quote"
    EMOJI = "emoji"
    COMMAND = "command"
    URL = "url"
    USER_LINK = "user_link"
    CHANNEL_LINK = "channel_link"


# ── Markup tree ─────────────────────────────────────────────


@dataclass
class Text:
    text: str
    type: NodeType = field(default=NodeType.TEXT, init=False)


@dataclass
class Code:
    text: str
    type: NodeType = field(default=NodeType.CODE, init=False)


@dataclass
class PreText:
    text: str
    type: NodeType = field(default=NodeType.PRE_TEXT, init=False)


@dataclass
class Emoji:
    name: str
    variation: Optional[str] = None  # e.g. "skin-tone-2"
    type: NodeType = field(default=NodeType.EMOJI, init=False)


@dataclass
class Command:
    """``<!here>``, ``<!subteam^S1|@team>`` and friends."""

    name: str
    arguments: List[str] = field(default_factory=list)
    label: Optional[str] = None
    type: NodeType = field(default=NodeType.COMMAND, init=False)


@dataclass
class UserLink:
    user_id: str
    label: Optional[str] = None
    type: NodeType = field(default=NodeType.USER_LINK, init=False)


@dataclass
class ChannelLink:
    channel_id: str
    label: Optional[str] = None
    type: NodeType = field(default=NodeType.CHANNEL_LINK, init=False)


@dataclass
class URL:
    url: str
    children: List["MarkupNode"] = field(default_factory=list)
    type: NodeType = field(default=NodeType.URL, init=False)


@dataclass
class Bold:
    children: List["MarkupNode"] = field(default_factory=list)
    type: NodeType = field(default=NodeType.BOLD, init=False)


@dataclass
class Italic:
    children: List["MarkupNode"] = field(default_factory=list)
    type: NodeType = field(default=NodeType.ITALIC, init=False)


@dataclass
class Strike:
    children: List["MarkupNode"] = field(default_factory=list)
    type: NodeType = field(default=NodeType.STRIKE, init=False)


@dataclass
class Quote:
    children: List["MarkupNode"] = field(default_factory=list)
    type: NodeType = field(default=NodeType.QUOTE, init=False)


@dataclass
class Root:
    children: List["MarkupNode"] = field(default_factory=list)
    type: NodeType = field(default=NodeType.ROOT, init=False)


MarkupNode = Union[
    Root, Text, Bold, Italic, Strike, Code, PreText, Quote,
    Emoji, Command, URL, UserLink, ChannelLink,
]


# ── Feed records ────────────────────────────────────────────


@dataclass(frozen=True)
class EmojiEntry:
    short_name: str
    unified: str  # hyphen-separated hex codepoints, e.g. "1F1EF-1F1F5"


@dataclass
class Profile:
    user_id: str
    display_name: str
    image_72: str = ""
    image_192: str = ""

    @classmethod
    def from_member(cls, member: Dict[str, Any]) -> "Profile":
        """Build from a ``users.list`` member record.

        Slack leaves ``display_name`` blank for many accounts, so fall back
        to ``real_name`` and then the handle.
        """
        profile = member.get("profile") or {}
        display_name = (
            profile.get("display_name")
            or profile.get("real_name")
            or member.get("real_name")
            or member.get("name")
            or ""
        )
        return cls(
            user_id=member.get("id", ""),
            display_name=display_name,
            image_72=profile.get("image_72", ""),
            image_192=profile.get("image_192", ""),
        )


@dataclass
class Message:
    user_id: str
    text: str

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "Message":
        return cls(user_id=raw.get("user") or "", text=raw.get("text") or "")


@dataclass
class RenderedItem:
    profile_image: str
    display_name: str
    msg_html: str
