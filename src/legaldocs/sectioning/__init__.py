"""Sectioning of heading-delimited documents."""

from .sectioner import (
    HEADING_PATTERN,
    format_heading,
    get_heading_level,
    match_heading,
    reassemble,
    sectionize,
    split_lines,
)

__all__ = [
    "HEADING_PATTERN",
    "format_heading",
    "get_heading_level",
    "match_heading",
    "reassemble",
    "sectionize",
    "split_lines",
]
