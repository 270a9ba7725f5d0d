"""HTML transcript page, written in chunks for StreamingResponse."""

from html import escape
from typing import Iterable, Iterator

from slackfeed.domain.models import RenderedItem


def render_item(item: RenderedItem) -> str:
    """One ``<li>``: avatar, display name, then the message HTML."""
    return f"""
      <li>
        <div style="display:flex;">
          <div style="margin-right:0.5rem">
            <img style="width: 50px;height:auto;" src="{escape(item.profile_image)}" />
          </div>
          <div>
            <h6>{escape(item.display_name)}</h6>
            {item.msg_html}
          </div>
        </div>
      </li>"""


def iter_page(items: Iterable[RenderedItem]) -> Iterator[str]:
    yield "<ol>"
    for item in items:
        yield render_item(item)
    yield "\n</ol>\n"
