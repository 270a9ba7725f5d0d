"""Join messages to author profiles and render the feed.

Pure Python, no framework dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from slackfeed.domain.emoji import EmojiTable
from slackfeed.domain.models import Message, Profile, RenderedItem
from slackfeed.domain.renderer import render_text

UNKNOWN_DISPLAY_NAME = "Unknown user"


class MissingProfile(str, Enum):
    """What to do with a message whose author is not in the user list."""

    PLACEHOLDER = "placeholder"
    SKIP = "skip"


@dataclass(frozen=True)
class FeedView:
    """Per-output choices: how many messages, which avatar, which order."""

    max_messages: int
    image_field: str  # "image_72" or "image_192"
    chronological: bool  # True = oldest first


HTML_VIEW = FeedView(max_messages=15, image_field="image_72", chronological=True)
JSON_VIEW = FeedView(max_messages=20, image_field="image_192", chronological=False)


def placeholder_profile(user_id: str) -> Profile:
    return Profile(user_id=user_id, display_name=UNKNOWN_DISPLAY_NAME)


def index_profiles(
    messages: Sequence[Dict[str, Any]],
    members: Sequence[Dict[str, Any]],
) -> Dict[str, Profile]:
    """Map user id -> Profile for the authors of ``messages`` only."""
    authors = {m.get("user") for m in messages if m.get("user")}
    return {
        member["id"]: Profile.from_member(member)
        for member in members
        if member.get("id") in authors
    }


def select_messages(
    messages: Sequence[Dict[str, Any]],
    max_messages: int,
    chronological: bool,
) -> List[Dict[str, Any]]:
    """Keep the newest ``max_messages``; flip to oldest-first if asked.

    ``messages`` arrive newest first, as Slack returns them.
    """
    selected = list(messages[: max(max_messages, 0)])
    if chronological:
        selected.reverse()
    return selected


def assemble(
    messages: Sequence[Dict[str, Any]],
    members: Sequence[Dict[str, Any]],
    view: FeedView,
    missing_profile: MissingProfile = MissingProfile.PLACEHOLDER,
    emoji: Optional[EmojiTable] = None,
) -> List[RenderedItem]:
    """Build the rendered feed for one output view."""
    profiles = index_profiles(messages, members)
    items: List[RenderedItem] = []
    for raw in select_messages(messages, view.max_messages, view.chronological):
        message = Message.from_raw(raw)
        profile = profiles.get(message.user_id)
        if profile is None:
            if missing_profile == MissingProfile.SKIP:
                continue
            profile = placeholder_profile(message.user_id)
        items.append(
            RenderedItem(
                profile_image=getattr(profile, view.image_field, ""),
                display_name=profile.display_name,
                msg_html=render_text(message.text, emoji),
            )
        )
    return items
