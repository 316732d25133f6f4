"""rssreport - RSS 2.0 feeds to static HTML tables."""

__version__ = "0.1.0"
