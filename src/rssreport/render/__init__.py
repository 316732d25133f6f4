"""Render package."""

from rssreport.render.channel import render_footer, render_header
from rssreport.render.fields import (
    TITLE_RULES,
    TitleSignals,
    render_date,
    render_item,
    render_source,
    render_title,
    select_title_rule,
)
from rssreport.render.finder import child_text, find_first, find_first_child, text_of

__all__ = [
    "find_first_child",
    "find_first",
    "text_of",
    "child_text",
    "render_date",
    "render_source",
    "render_title",
    "render_item",
    "select_title_rule",
    "TitleSignals",
    "TITLE_RULES",
    "render_header",
    "render_footer",
]
