"""Services package."""

from rssreport.services.feed_processor import FeedProcessor, FeedResult
from rssreport.services.index_builder import IndexBuilder, read_feed_list

__all__ = [
    "FeedProcessor",
    "FeedResult",
    "IndexBuilder",
    "read_feed_list",
]
