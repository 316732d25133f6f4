"""Abstract XML tree parser interface using Protocol."""

from typing import Protocol

from rssreport.models.xml_tree import XMLTree


class TreeParser(Protocol):
    """Raw XML to XMLTree parser protocol."""

    def parse(self, raw_content: bytes | str, source_id: str) -> XMLTree:
        """Parse raw XML into the root node of an XMLTree.

        Args:
            raw_content: Raw XML document.
            source_id: Source identifier for error messages.

        Returns:
            Root XMLTree node.

        Raises:
            ParseError: When the document is not well-formed XML.
        """
        ...
