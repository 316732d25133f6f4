"""Output package."""

from rssreport.output.stream import OutputStream, open_output

__all__ = [
    "OutputStream",
    "open_output",
]
