"""Models package."""

from rssreport.models.feed import FeedEntry, FeedList
from rssreport.models.xml_tree import XMLTree

__all__ = [
    "XMLTree",
    "FeedEntry",
    "FeedList",
]
