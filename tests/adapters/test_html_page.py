"""Tests for the HTML transcript writer."""

from slackfeed.adapters.web.html_page import iter_page, render_item
from slackfeed.domain.models import RenderedItem


class TestRenderItem:
    def test_message_html_is_raw(self):
        item = RenderedItem(profile_image="a.png", display_name="Ann", msg_html="<i>hi</i>")
        assert "<i>hi</i>" in render_item(item)

    def test_attributes_escaped(self):
        item = RenderedItem(profile_image='x" onerror="alert(1)', display_name="<Ann>", msg_html="")
        html = render_item(item)
        assert 'src="x&quot; onerror=&quot;alert(1)"' in html
        assert "<h6>&lt;Ann&gt;</h6>" in html


class TestIterPage:
    def test_empty_list(self):
        assert "".join(iter_page([])) == "<ol>\n</ol>\n"

    def test_one_li_per_item(self):
        items = [RenderedItem("a.png", "Ann", "one"), RenderedItem("b.png", "Bob", "two")]
        page = "".join(iter_page(items))
        assert page.count("<li>") == 2
        assert page.index("one") < page.index("two")
