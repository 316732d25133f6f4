"""Child element lookup by tag name."""

from rssreport.models.xml_tree import XMLTree


def find_first_child(node: XMLTree, tag: str) -> int | None:
    """Return the index of the first child labeled ``tag``, or None."""
    assert node.is_tag, "Violation of: node is a tag"
    assert tag, "Violation of: tag is not empty"
    for index, child in enumerate(node.children):
        if child.label == tag:
            return index
    return None


def find_first(node: XMLTree, tag: str) -> XMLTree | None:
    index = find_first_child(node, tag)
    return None if index is None else node.child(index)


def text_of(node: XMLTree | None) -> str | None:
    """Text of a leaf-valued element; None when absent or childless."""
    if node is None or node.child_count == 0:
        return None
    return node.child(0).label


def child_text(node: XMLTree, tag: str) -> str | None:
    """Shorthand for ``text_of(find_first(node, tag))``."""
    return text_of(find_first(node, tag))
