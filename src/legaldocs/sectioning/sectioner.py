"""Split heading-delimited document text into ordered sections."""

import re

from legaldocs.core import Section

# One to six markers, whitespace, then text to end of line. The title class
# excludes line terminators so a line carrying a stray '\r' is never a heading.
HEADING_PATTERN = re.compile(r'^(#{1,6})\s+([^\r\n\u2028\u2029]+)$')


def split_lines(document: str) -> list[str]:
    """Split a document on '\\n'.

    A single trailing newline terminates the last line rather than opening
    an empty one. No other line-ending normalization is applied.
    """
    if not document:
        return []
    lines = document.split('\n')
    if document.endswith('\n'):
        lines.pop()
    return lines


def match_heading(line: str) -> tuple[int, str] | None:
    """Match a heading line.

    Args:
        line: A single line of document text

    Returns:
        Tuple of (level, title), or None if the line is not a heading
    """
    match = HEADING_PATTERN.fullmatch(line)
    if match is None:
        return None
    return len(match.group(1)), match.group(2)


def get_heading_level(line: str) -> int | None:
    """Get the heading level (1-6) of a line, or None if not a heading."""
    heading = match_heading(line)
    return heading[0] if heading else None


def sectionize(document: str) -> list[Section]:
    """Split a document into sections, one per heading line.

    Lines before the first heading are discarded. Every other line belongs
    to the body of the closest heading above it. A document with no heading
    lines yields an empty list; callers render it unsectioned.

    Args:
        document: The full document text

    Returns:
        Sections in document order, indexed from zero
    """
    sections: list[Section] = []
    current: tuple[int, str] | None = None
    body_lines: list[str] = []

    for line in split_lines(document):
        heading = match_heading(line)
        if heading is not None:
            if current is not None:
                sections.append(_close_section(current, body_lines, len(sections)))
            current = heading
            body_lines = []
        elif current is not None:
            body_lines.append(line)

    if current is not None:
        sections.append(_close_section(current, body_lines, len(sections)))

    return sections


def _close_section(heading: tuple[int, str], body_lines: list[str], index: int) -> Section:
    level, title = heading
    return Section(title=title, level=level, body='\n'.join(body_lines), index=index)


def format_heading(section: Section) -> str:
    """Render the heading line for a section (e.g. '## Scope')."""
    return f"{'#' * section.level} {section.title}"


def reassemble(sections: list[Section]) -> str:
    """Rebuild document text from sections.

    Emits each heading line followed by its body. Empty bodies contribute
    no lines, so the output matches the source with its preamble removed,
    modulo blank-only bodies and the trailing newline.

    Args:
        sections: Sections as returned by sectionize()

    Returns:
        Newline-joined document text
    """
    parts = []
    for section in sections:
        parts.append(format_heading(section))
        if section.body:
            parts.append(section.body)
    return '\n'.join(parts)
