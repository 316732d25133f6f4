"""Custom exceptions for rssreport.

Provides a structured exception hierarchy for different error scenarios.
"""


class RSSReportError(Exception):
    """Base exception class for all rssreport errors."""

    pass


class FetchError(RSSReportError):
    """Raised when an XML document cannot be fetched or read.

    Attributes:
        source_id: The URL or path that failed.
    """

    def __init__(self, source_id: str, message: str):
        self.source_id = source_id
        super().__init__(f"Failed to fetch {source_id}: {message}")


class ParseError(RSSReportError):
    """Raised when XML content is not well-formed or a feed list is invalid.

    Attributes:
        source_id: The URL or path of the document with the parse error.
    """

    def __init__(self, source_id: str, message: str):
        self.source_id = source_id
        super().__init__(f"Failed to parse {source_id}: {message}")


class OutputError(RSSReportError):
    """Raised when an output file cannot be opened or written.

    Attributes:
        path: The output file path.
    """

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"Output failed for {path}: {message}")
