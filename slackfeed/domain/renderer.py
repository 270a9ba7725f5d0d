"""Markup tree → HTML fragment."""

from html import escape
from typing import Any, List, Optional, Tuple

from slackfeed.domain.emoji import EMOJI_TABLE, EmojiTable
from slackfeed.domain.markup_parser import parse
from slackfeed.domain.models import NodeType

# Composite kinds -> wrapping tag ("" means no wrapper)
WRAPPERS = {
    NodeType.ROOT: "",
    NodeType.BOLD: "strong",
    NodeType.ITALIC: "i",
    NodeType.STRIKE: "del",
}


def _render_leaf(node: Any, node_type: str, emoji: EmojiTable) -> str:
    if node_type == NodeType.COMMAND:
        return f"<strong>#{escape(getattr(node, 'name', ''))}</strong>"
    if node_type == NodeType.EMOJI:
        return emoji.resolve(getattr(node, "name", ""))
    if node_type == NodeType.TEXT:
        return escape(getattr(node, "text", ""))
    return ""


def render_node(node: Any, emoji: Optional[EmojiTable] = None) -> str:
    """Render a markup node and its children as an HTML fragment.

    Kinds without an HTML form (code, links, quotes, anything unknown)
    render as the empty string. Iterative, so tree depth is unbounded.
    """
    if emoji is None:
        emoji = EMOJI_TABLE
    parts: List[str] = []
    # (node, None) renders a node; (None, "</tag>") emits a pending close tag
    stack: List[Tuple[Any, Optional[str]]] = [(node, None)]
    while stack:
        current, closing = stack.pop()
        if closing is not None:
            parts.append(closing)
            continue
        node_type = getattr(current, "type", None)
        if not isinstance(node_type, str):
            continue
        if node_type not in WRAPPERS:
            parts.append(_render_leaf(current, node_type, emoji))
            continue
        tag = WRAPPERS[node_type]
        if tag:
            parts.append(f"<{tag}>")
            stack.append((None, f"</{tag}>"))
        children = getattr(current, "children", None) or ()
        stack.extend((child, None) for child in reversed(list(children)))
    return "".join(parts)


def render_text(text: str, emoji: Optional[EmojiTable] = None) -> str:
    """Parse raw message text and render it."""
    return render_node(parse(text), emoji)
