"""XMLTree parser backed by xml.etree.ElementTree."""

import xml.etree.ElementTree as ET

from rssreport.exceptions import ParseError
from rssreport.models.xml_tree import XMLTree


class ElementTreeParser:
    """Parses well-formed XML into an XMLTree."""

    def parse(self, raw_content: bytes | str, source_id: str) -> XMLTree:
        if not raw_content or not raw_content.strip():
            raise ParseError(source_id, "Empty document")
        try:
            root = ET.fromstring(raw_content)
        except ET.ParseError as e:
            raise ParseError(source_id, f"Malformed XML: {e}") from e
        return XMLTree.from_element(root)
