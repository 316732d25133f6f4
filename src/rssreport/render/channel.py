"""Channel header and footer rendering."""

from rssreport.models.xml_tree import XMLTree
from rssreport.output.stream import OutputStream
from rssreport.render.finder import child_text

EMPTY_TITLE = "Empty Title"
NO_DESCRIPTION = "No description"


def render_header(channel: XMLTree, out: OutputStream) -> None:
    """Write the page opening, channel heading and the table header row.

    The channel ``link`` is required; title and description fall back to
    placeholders when absent or empty.
    """
    assert channel.is_tag and channel.label == "channel", (
        "Violation of: channel is a <channel> tag"
    )
    assert out.is_open, "Violation of: out is open"

    title = child_text(channel, "title") or EMPTY_TITLE
    description = child_text(channel, "description") or NO_DESCRIPTION
    link = child_text(channel, "link")
    assert link is not None, "Violation of: channel has a <link> with text"

    out.println(f"<html><head><title>{title}</title></head><body>")
    out.println(f"<h1><a href={link}>{title}</a></h1>")
    out.println(f"<p>{description}</p>")
    out.println('<table border="1">')
    out.println("<tr><th>Date</th><th>Source</th><th>News</th></tr>")


def render_footer(out: OutputStream) -> None:
    assert out.is_open, "Violation of: out is open"

    out.println("</table>")
    out.println("</body></html>")
