"""Per-item rendering: one table row with date, source and title cells.

Each field resolves through fallback rules so that any combination of
missing or empty ``pubDate``, ``source``, ``title``, ``description`` and
``link`` children still yields a well-formed row.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from rssreport.models.xml_tree import XMLTree
from rssreport.output.stream import OutputStream
from rssreport.render.finder import child_text, find_first, text_of

NO_DATE = "No date available"
NO_SOURCE = "No source available"
NO_TITLE = "No title available"


def cell(content: str) -> str:
    return f"<td>{content}</td>"


def anchor(href: str, text: str) -> str:
    return f"<a href={href}>{text}</a>"


def render_date(item: XMLTree) -> str:
    """Date cell: the ``pubDate`` text or the no-date placeholder."""
    date = child_text(item, "pubDate")
    return cell(NO_DATE if date is None else date)


def render_source(item: XMLTree) -> str:
    """Source cell: a link to the source's ``url`` attribute, or a placeholder."""
    source = find_first(item, "source")
    text = text_of(source)
    if text is None:
        return cell(NO_SOURCE)
    return cell(anchor(source.attribute_value("url"), text))


class TitleState(Enum):
    MISSING = "missing"  # no title element, or one without a text child
    EMPTY = "empty"
    PRESENT = "present"


@dataclass(frozen=True)
class TitleSignals:
    """The inputs of title resolution for one item."""

    title: TitleState
    title_text: str
    description: str  # missing is treated as empty
    link: str | None
    has_description: bool = True  # description element carries a text child

    @classmethod
    def of(cls, item: XMLTree) -> TitleSignals:
        title = child_text(item, "title")
        if title is None:
            state = TitleState.MISSING
        elif title == "":
            state = TitleState.EMPTY
        else:
            state = TitleState.PRESENT
        description = child_text(item, "description")
        return cls(
            title=state,
            title_text=title or "",
            description=description or "",
            link=child_text(item, "link"),
            has_description=description is not None,
        )

    @property
    def has_link(self) -> bool:
        return self.link is not None


@dataclass(frozen=True)
class TitleRule:
    """One (predicate, renderer) pair of the title resolution table."""

    name: str
    applies: Callable[[TitleSignals], bool]
    render: Callable[[TitleSignals], str]


def _linked(value: str, signals: TitleSignals) -> str:
    return anchor(signals.link, value) if signals.has_link else value


def _missing_title(signals: TitleSignals) -> str:
    # Description text, even if empty; placeholder only without a description text child.
    value = signals.description if signals.has_description else NO_TITLE
    return _linked(value, signals)


def _blank(signals: TitleSignals) -> bool:
    return signals.title is TitleState.EMPTY and not signals.description


# Evaluated top to bottom, first match wins. Predicates are disjoint.
TITLE_RULES: tuple[TitleRule, ...] = (
    TitleRule(
        "missing-title",
        lambda s: s.title is TitleState.MISSING,
        _missing_title,
    ),
    TitleRule(
        "blank-unlinked",
        lambda s: _blank(s) and not s.has_link,
        lambda s: NO_TITLE,
    ),
    TitleRule(
        "blank-linked",
        lambda s: _blank(s) and s.has_link,
        lambda s: anchor(s.link, NO_TITLE),
    ),
    TitleRule(
        "title-unlinked",
        lambda s: s.title is TitleState.PRESENT and not s.has_link,
        lambda s: s.title_text,
    ),
    TitleRule(
        "title-linked",
        lambda s: s.title is TitleState.PRESENT and s.has_link,
        lambda s: anchor(s.link, s.title_text),
    ),
    TitleRule(
        "description-unlinked",
        lambda s: s.title is TitleState.EMPTY and bool(s.description) and not s.has_link,
        lambda s: s.description,
    ),
    TitleRule(
        "description-linked",
        lambda s: s.title is TitleState.EMPTY and bool(s.description) and s.has_link,
        lambda s: anchor(s.link, s.description),
    ),
)


def select_title_rule(signals: TitleSignals) -> TitleRule:
    """Return the first rule whose predicate holds."""
    for rule in TITLE_RULES:
        if rule.applies(signals):
            return rule
    raise AssertionError(f"No title rule for {signals!r}")


def render_title(item: XMLTree) -> str:
    signals = TitleSignals.of(item)
    return cell(select_title_rule(signals).render(signals))


def render_item(item: XMLTree, out: OutputStream) -> None:
    """Write the table row for one ``<item>``."""
    assert item.is_tag and item.label == "item", "Violation of: item is an <item> tag"
    assert out.is_open, "Violation of: out is open"

    out.println("<tr>" + render_date(item) + render_source(item) + render_title(item) + "</tr>")
