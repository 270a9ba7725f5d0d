"""Slack mrkdwn parsing — message text → markup tree.

Pure Python, no framework dependencies. Covers the subset of Slack's
message formatting that shows up in channel history:

    *bold*  _italic_  ~strike~  `code`  ```pre```  > quote
    :emoji:  :emoji::skin-tone-2:
    <@U123|name>  <#C123|name>  <!here>  <https://example.com|label>

Anything that does not match becomes text. ``parse`` never raises.
"""

import re
from typing import Dict, List, Optional, Tuple, Type

from slackfeed.domain.models import (
    URL,
    Bold,
    ChannelLink,
    Code,
    Command,
    Emoji,
    Italic,
    MarkupNode,
    PreText,
    Quote,
    Root,
    Strike,
    Text,
    UserLink,
)

PRE_RE = re.compile(r"```(.+?)```", re.DOTALL)
CODE_RE = re.compile(r"`([^`\n]+)`")
ANGLE_RE = re.compile(r"<([^<>\n]+)>")
EMOJI_RE = re.compile(r":([a-z0-9_+'\-]+):(?::(skin-tone-[2-6]):)?")
# Slack delivers a leading ">" as "&gt;"
QUOTE_RE = re.compile(r"(?:>|&gt;)[ \t]?([^\n]*)\n?")


def _span_re(marker: str) -> "re.Pattern[str]":
    m = re.escape(marker)
    return re.compile(rf"{m}(?=\S)([^\n]*?\S){m}(?!\w)")


SPAN_TYPES: Dict[str, Type] = {
    "*": Bold,
    "_": Italic,
    "~": Strike,
}
SPAN_RES = {marker: _span_re(marker) for marker in SPAN_TYPES}


def unescape(text: str) -> str:
    """Decode the three entities Slack escapes in message text."""
    return text.replace("&lt;", "<").replace("&gt;", ">").replace("&amp;", "&")


def _is_word(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def _parse_angle(body: str) -> MarkupNode:
    target, _, label = body.partition("|")
    if target.startswith("@"):
        return UserLink(user_id=target[1:], label=unescape(label) or None)
    if target.startswith("#"):
        return ChannelLink(channel_id=target[1:], label=unescape(label) or None)
    if target.startswith("!"):
        name, *arguments = target[1:].split("^")
        return Command(name=name, arguments=arguments, label=unescape(label) or None)
    return URL(url=unescape(target), children=_parse_nodes(label, allow_quote=False))


def _match_at(text: str, i: int, allow_quote: bool) -> Optional[Tuple[MarkupNode, int]]:
    """Try every construct at position ``i``; return (node, end) or None."""
    ch = text[i]
    prev = text[i - 1] if i > 0 else ""

    if allow_quote and ch in ">&" and (i == 0 or prev == "\n"):
        m = QUOTE_RE.match(text, i)
        if m:
            return Quote(children=_parse_nodes(m.group(1), allow_quote=False)), m.end()

    if ch == "`":
        m = PRE_RE.match(text, i)
        if m:
            return PreText(text=unescape(m.group(1))), m.end()
        m = CODE_RE.match(text, i)
        if m:
            return Code(text=unescape(m.group(1))), m.end()
        return None

    if ch == "<":
        m = ANGLE_RE.match(text, i)
        if m:
            return _parse_angle(m.group(1)), m.end()
        return None

    if ch in SPAN_RES and not _is_word(prev):
        m = SPAN_RES[ch].match(text, i)
        if m:
            node_cls = SPAN_TYPES[ch]
            return node_cls(children=_parse_nodes(m.group(1), allow_quote=False)), m.end()
        return None

    if ch == ":" and not prev.isalnum():
        m = EMOJI_RE.match(text, i)
        if m:
            return Emoji(name=m.group(1), variation=m.group(2)), m.end()

    return None


def _parse_nodes(text: str, allow_quote: bool = True) -> List[MarkupNode]:
    nodes: List[MarkupNode] = []
    buffer: List[str] = []
    i = 0
    while i < len(text):
        matched = _match_at(text, i, allow_quote)
        if matched is None:
            buffer.append(text[i])
            i += 1
            continue
        if buffer:
            nodes.append(Text(text=unescape("".join(buffer))))
            buffer = []
        node, i = matched
        nodes.append(node)
    if buffer:
        nodes.append(Text(text=unescape("".join(buffer))))
    return nodes


def parse(text: str) -> Root:
    """Parse raw Slack message text into a markup tree."""
    return Root(children=_parse_nodes(text or ""))
