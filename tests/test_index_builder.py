"""Tests for index page assembly."""

import pytest

from rssreport.exceptions import ParseError
from rssreport.models.xml_tree import XMLTree
from rssreport.services.feed_processor import FeedProcessor
from rssreport.services.index_builder import IndexBuilder, read_feed_list
from rssreport.sources.factory import create_source_factory

tag = XMLTree.tag


@pytest.fixture
def builder(test_settings):
    factory = create_source_factory(test_settings)
    processor = FeedProcessor(test_settings.output_dir, factory)
    return IndexBuilder(processor, factory, default_title=test_settings.index_title)


def write_feed_list(tmp_path, body, title="Morning"):
    path = tmp_path / "feeds.xml"
    title_attr = f' title="{title}"' if title is not None else ""
    path.write_text(f"<feeds{title_attr}>{body}</feeds>", encoding="utf-8")
    return path


class TestReadFeedList:
    def test_entries_in_order(self):
        root = tag(
            "feeds",
            tag("feed", url="u1", name="One", file="one.html"),
            tag("comment", "ignored"),
            tag("feed", url="u2", name="Two", file="two.html", extra="x"),
            title="Index",
        )
        feed_list = read_feed_list(root, "feeds.xml")
        assert feed_list.title == "Index"
        assert [f.name for f in feed_list.feeds] == ["One", "Two"]
        assert feed_list.feeds[1].file == "two.html"

    def test_default_title(self):
        assert read_feed_list(tag("feeds"), "feeds.xml", "Fallback").title == "Fallback"

    @pytest.mark.parametrize(
        "attributes",
        [
            {"name": "One", "file": "one.html"},
            {"url": "u1", "file": "one.html"},
            {"url": "u1", "name": "One", "file": ""},
            {"url": "u1", "name": "One", "file": "../one.html"},
            {"url": "u1", "name": "One", "file": "pages/one.html"},
            {"url": "u1", "name": "One", "file": "..\\one.html"},
        ],
    )
    def test_invalid_entry(self, attributes):
        root = tag("feeds", tag("feed", **attributes))
        with pytest.raises(ParseError, match="position 0"):
            read_feed_list(root, "feeds.xml")


def test_builds_index_and_feed_pages(builder, tmp_path, rss_file, atom_file, test_settings):
    feed_list = write_feed_list(
        tmp_path,
        f'<feed url="{rss_file}" name="Tech" file="tech.html"/>'
        f'<feed url="{atom_file}" name="Atom" file="atom.html"/>',
    )

    index = builder.build(str(feed_list), "index")

    assert index == test_settings.output_dir / "index.html"
    assert index.read_text(encoding="utf-8").splitlines() == [
        "<html><head><title>Morning</title></head><body>",
        "<h1>Morning</h1>",
        '<ul style="list-style-type: disc;"><li><a href=tech.html>Tech</a></li></ul>',
        '<ul style="list-style-type: disc;"><li><a href=atom.html>Atom</a></li></ul>',
        "</body></html>",
    ]
    tech = (test_settings.output_dir / "tech.html").read_text(encoding="utf-8")
    assert "<td>Mon</td>" in tech
    atom = (test_settings.output_dir / "atom.html").read_text(encoding="utf-8")
    assert atom == "XMLTree must be RSS 2.0\n"


def test_untitled_feed_list_uses_default(builder, tmp_path):
    feed_list = write_feed_list(tmp_path, "", title=None)
    index = builder.build(str(feed_list), "index")
    assert index.read_text(encoding="utf-8").splitlines()[1] == "<h1>RSS Aggregator</h1>"


def test_invalid_feed_list_writes_nothing(builder, tmp_path, test_settings):
    feed_list = write_feed_list(tmp_path, '<feed name="x" file="x.html"/>')
    with pytest.raises(ParseError):
        builder.build(str(feed_list), "index")
    assert not (test_settings.output_dir / "index.html").exists()


def test_feed_file_cannot_escape_output_dir(builder, tmp_path, rss_file, test_settings):
    feed_list = write_feed_list(tmp_path, f'<feed url="{rss_file}" name="Tech" file="../escaped.html"/>')
    with pytest.raises(ParseError, match="path separators"):
        builder.build(str(feed_list), "index")
    assert not (test_settings.output_dir.parent / "escaped.html").exists()
