"""Tests for channel header and footer rendering."""

import pytest

from rssreport.models.xml_tree import XMLTree
from rssreport.render.channel import render_footer, render_header

tag = XMLTree.tag


def test_header_layout(out):
    channel = tag(
        "channel",
        tag("title", "Tech News"),
        tag("description", "Daily tech"),
        tag("link", "http://x.com"),
    )
    render_header(channel, out)
    assert out.lines == [
        "<html><head><title>Tech News</title></head><body>",
        "<h1><a href=http://x.com>Tech News</a></h1>",
        "<p>Daily tech</p>",
        '<table border="1">',
        "<tr><th>Date</th><th>Source</th><th>News</th></tr>",
    ]


def test_missing_description(out):
    render_header(tag("channel", tag("title", "T"), tag("link", "L")), out)
    assert "<p>No description</p>" in out.lines


def test_empty_description(out):
    render_header(tag("channel", tag("description"), tag("link", "L")), out)
    assert "<p>No description</p>" in out.lines


@pytest.mark.parametrize("title", [None, tag("title"), tag("title", "")])
def test_title_defaults(out, title):
    children = [tag("link", "L")] if title is None else [title, tag("link", "L")]
    render_header(tag("channel", *children), out)
    assert out.lines[0] == "<html><head><title>Empty Title</title></head><body>"
    assert out.lines[1] == "<h1><a href=L>Empty Title</a></h1>"


def test_missing_link_is_a_contract_violation(out):
    with pytest.raises(AssertionError, match="link"):
        render_header(tag("channel", tag("title", "T")), out)


def test_wrong_node_is_a_contract_violation(out):
    with pytest.raises(AssertionError):
        render_header(tag("item", tag("link", "L")), out)


def test_footer(out):
    render_footer(out)
    assert out.lines == ["</table>", "</body></html>"]
