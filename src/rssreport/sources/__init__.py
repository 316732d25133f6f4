"""Sources package."""

from rssreport.sources.base import FeedSource
from rssreport.sources.factory import create_source_factory
from rssreport.sources.xml_source import XMLSource

__all__ = [
    "FeedSource",
    "XMLSource",
    "create_source_factory",
]
