"""Source factory bound to application settings."""

from collections.abc import Callable

from rssreport.config.settings import Settings
from rssreport.sources.base import FeedSource
from rssreport.sources.xml_source import XMLSource


def create_source_factory(settings: Settings) -> Callable[[str], FeedSource]:
    """Return a callable building configured XMLSource instances."""

    def factory(location: str) -> FeedSource:
        return XMLSource(
            location,
            timeout=settings.fetch_timeout,
            user_agent=settings.user_agent,
            follow_redirects=settings.follow_redirects,
        )

    return factory
