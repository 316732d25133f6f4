"""Index page assembly over a feed list document."""

from collections.abc import Callable
from pathlib import Path

import structlog
from pydantic import ValidationError

from rssreport.exceptions import ParseError
from rssreport.models.feed import FeedEntry, FeedList
from rssreport.models.xml_tree import XMLTree
from rssreport.output.stream import OutputStream, open_output
from rssreport.parsers.base import TreeParser
from rssreport.parsers.element_tree_parser import ElementTreeParser
from rssreport.services.feed_processor import FeedProcessor, FeedResult
from rssreport.sources.base import FeedSource

logger = structlog.get_logger()


def read_feed_list(root: XMLTree, source_id: str, default_title: str = "RSS Aggregator") -> FeedList:
    """Build a FeedList from the root of a feed list document.

    The root's ``title`` attribute names the index; every ``<feed>`` child
    must carry non-empty ``url``, ``name`` and ``file`` attributes.

    Raises:
        ParseError: When a feed entry is incomplete.
    """
    feeds: list[FeedEntry] = []
    for position, child in enumerate(root.children):
        if not (child.is_tag and child.label == "feed"):
            continue
        try:
            feeds.append(FeedEntry.model_validate(dict(child.attributes)))
        except ValidationError as e:
            raise ParseError(source_id, f"Invalid <feed> at position {position}: {e}") from e

    title = root.attribute_value("title") if root.is_tag else ""
    return FeedList(title=title or default_title, feeds=feeds)


class IndexBuilder:
    """Processes every feed of a feed list and links them from an index page."""

    def __init__(
        self,
        processor: FeedProcessor,
        source_factory: Callable[[str], FeedSource],
        parser: TreeParser | None = None,
        open_stream: Callable[[Path], OutputStream] = open_output,
        default_title: str = "RSS Aggregator",
    ):
        self._processor = processor
        self._source_factory = source_factory
        self._parser = parser or ElementTreeParser()
        self._open_stream = open_stream
        self._default_title = default_title

    def load(self, feed_list_url: str) -> FeedList:
        source = self._source_factory(feed_list_url)
        root = self._parser.parse(source.fetch_raw(), source.source_id)
        return read_feed_list(root, source.source_id, self._default_title)

    def build(self, feed_list_url: str, output_base_name: str) -> Path:
        """Write ``{output_base_name}.html`` and one page per listed feed.

        Feeds are processed one after another; each entry is linked once its
        page has been written.

        Returns:
            Path of the index page.
        """
        feed_list = self.load(feed_list_url)
        path = self._processor.output_dir / f"{output_base_name}.html"
        log = logger.bind(feed_list=feed_list_url, index=str(path))
        log.info("Building index", feed_count=len(feed_list.feeds))

        results: list[FeedResult] = []
        with self._open_stream(path) as out:
            out.println(f"<html><head><title>{feed_list.title}</title></head><body>")
            out.println(f"<h1>{feed_list.title}</h1>")
            for entry in feed_list.feeds:
                results.append(self._processor.process(entry.url, entry.file))
                write_index_entry(entry, out)
            out.println("</body></html>")

        log.info(
            "Index built",
            feeds=len(results),
            rejected=sum(1 for r in results if not r.valid),
            items=sum(r.item_count for r in results),
        )
        return path


def write_index_entry(entry: FeedEntry, out: OutputStream) -> None:
    out.println(f'<ul style="list-style-type: disc;"><li><a href={entry.file}>{entry.name}</a></li></ul>')
