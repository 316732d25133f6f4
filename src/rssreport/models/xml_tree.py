"""Read-only XML tree model.

A node is either a tag (label = tag name, ordered children, attributes)
or a text leaf (label = the character data, no children, no attributes).
Renderers consume this shape rather than ElementTree elements directly.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class XMLTree:
    """Immutable XML node."""

    label: str
    children: tuple[XMLTree, ...] = ()
    attributes: Mapping[str, str] = field(default_factory=dict)
    is_tag: bool = True

    def __post_init__(self):
        object.__setattr__(self, "children", tuple(self.children))
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @classmethod
    def tag(cls, label: str, *children: XMLTree | str, **attributes: str) -> XMLTree:
        """Build a tag node; plain strings become text leaves."""
        nodes = tuple(cls.text(c) if isinstance(c, str) else c for c in children)
        return cls(label, nodes, attributes)

    @classmethod
    def text(cls, value: str) -> XMLTree:
        """Build a text leaf."""
        return cls(value, (), {}, is_tag=False)

    @classmethod
    def from_element(cls, element: ET.Element) -> XMLTree:
        """Convert an ElementTree element into an XMLTree.

        A leaf element gets one text child when it carries text at all
        (stripped, so whitespace-only text yields an empty label). Between
        element children only non-blank text is kept.
        """
        elements = list(element)
        if not elements:
            children = () if element.text is None else (cls.text(element.text.strip()),)
            return cls(element.tag, children, element.attrib)

        nodes: list[XMLTree] = []
        if element.text and element.text.strip():
            nodes.append(cls.text(element.text.strip()))
        for child in elements:
            nodes.append(cls.from_element(child))
            if child.tail and child.tail.strip():
                nodes.append(cls.text(child.tail.strip()))
        return cls(element.tag, tuple(nodes), element.attrib)

    @property
    def child_count(self) -> int:
        return len(self.children)

    def child(self, index: int) -> XMLTree:
        """Return the child at ``index``."""
        assert 0 <= index < len(self.children), "Violation of: 0 <= index < |children|"
        return self.children[index]

    def attribute_value(self, name: str) -> str:
        """Return the attribute value, or an empty string when it is missing."""
        assert self.is_tag, "Violation of: node is a tag"
        return self.attributes.get(name, "")

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes
