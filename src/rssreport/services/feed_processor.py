"""Single-feed processing: RSS 2.0 document to one HTML table page."""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import structlog

from rssreport.models.xml_tree import XMLTree
from rssreport.output.stream import OutputStream, open_output
from rssreport.parsers.base import TreeParser
from rssreport.parsers.element_tree_parser import ElementTreeParser
from rssreport.render.channel import render_footer, render_header
from rssreport.render.fields import render_item
from rssreport.sources.base import FeedSource

logger = structlog.get_logger()

NOT_RSS_2_0 = "XMLTree must be RSS 2.0"


@dataclass(frozen=True)
class FeedResult:
    """Outcome of processing one feed."""

    url: str
    output_path: Path
    valid: bool
    item_count: int = 0


def is_rss_2_0(root: XMLTree) -> bool:
    """True for an ``<rss version="2.0">`` root whose first child is a channel."""
    return (
        root.is_tag
        and root.label == "rss"
        and root.attribute_value("version") == "2.0"
        and root.child_count > 0
        and root.child(0).is_tag
        and root.child(0).label == "channel"
    )


class FeedProcessor:
    """Converts one RSS 2.0 feed into an HTML table file.

    Every call opens its own output stream and closes it before returning,
    whether the feed renders, is rejected, or fetching fails.
    """

    def __init__(
        self,
        output_dir: Path,
        source_factory: Callable[[str], FeedSource],
        parser: TreeParser | None = None,
        open_stream: Callable[[Path], OutputStream] = open_output,
    ):
        """Initialize the processor.

        Args:
            output_dir: Directory receiving the generated files.
            source_factory: Builds a FeedSource for a URL or path.
            parser: XML parser; defaults to ElementTreeParser.
            open_stream: Output stream factory.
        """
        self._output_dir = Path(output_dir)
        self._source_factory = source_factory
        self._parser = parser or ElementTreeParser()
        self._open_stream = open_stream

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    def process(self, url: str, output_file_name: str) -> FeedResult:
        """Render the feed at ``url`` into ``output_dir / output_file_name``.

        Raises:
            FetchError: When the feed cannot be fetched.
            ParseError: When the feed is not well-formed XML.
            OutputError: When the output file cannot be written.
        """
        path = self._output_dir / output_file_name
        log = logger.bind(url=url, output=str(path))
        log.info("Processing feed")

        with self._open_stream(path) as out:
            source = self._source_factory(url)
            root = self._parser.parse(source.fetch_raw(), source.source_id)

            if not is_rss_2_0(root):
                log.warning("Feed rejected", root=root.label, version=root.attribute_value("version"))
                out.println(NOT_RSS_2_0)
                return FeedResult(url=url, output_path=path, valid=False)

            count = self.render_channel(root.child(0), out)

        log.info("Feed rendered", item_count=count)
        return FeedResult(url=url, output_path=path, valid=True, item_count=count)

    @staticmethod
    def render_channel(channel: XMLTree, out: OutputStream) -> int:
        """Write header, one row per ``<item>`` and footer; return the row count."""
        render_header(channel, out)
        count = 0
        for child in channel.children:
            if child.is_tag and child.label == "item":
                render_item(child, out)
                count += 1
        render_footer(out)
        return count
