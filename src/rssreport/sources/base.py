"""Abstract XML source interface using Protocol."""

from typing import Protocol


class FeedSource(Protocol):
    """Source of raw XML text for a feed or a feed list."""

    @property
    def source_id(self) -> str:
        """Identifier used in logs and errors (the URL or path)."""
        ...

    def fetch_raw(self) -> bytes:
        """Fetch raw XML content.

        Returns:
            bytes: Raw XML document; the parser honours its encoding declaration.

        Raises:
            FetchError: When the network request or file read fails.
        """
        ...
