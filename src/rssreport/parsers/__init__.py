"""Parsers package."""

from rssreport.parsers.base import TreeParser
from rssreport.parsers.element_tree_parser import ElementTreeParser

__all__ = [
    "TreeParser",
    "ElementTreeParser",
]
