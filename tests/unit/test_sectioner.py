"""Unit tests for document sectioning."""

import pytest

from legaldocs.sectioning import (
    format_heading,
    get_heading_level,
    match_heading,
    reassemble,
    sectionize,
    split_lines,
)

POLICY = """# Title
Intro text.
## Scope
Scope text.
#### Details
Detail text.
"""


class TestMatchHeading:
    """Tests for heading line detection."""

    @pytest.mark.parametrize("line,expected", [
        ("# Title", (1, "Title")),
        ("## Scope", (2, "Scope")),
        ("###### Deepest", (6, "Deepest")),
        ("#\tTabbed", (1, "Tabbed")),
        ("###   Padded", (3, "Padded")),
        ("#  ", (1, " ")),
    ])
    def test_heading_lines(self, line, expected):
        """Lines with 1-6 markers, whitespace and text are headings."""
        assert match_heading(line) == expected

    @pytest.mark.parametrize("line", [
        "",
        "plain text",
        "####### Seven markers",
        "#NoSpace",
        "#",
        "# ",
        " # Indented",
        "Text with # inside",
    ])
    def test_non_heading_lines(self, line):
        """Anything else falls through as body text."""
        assert match_heading(line) is None

    def test_title_keeps_trailing_whitespace(self):
        """Title is the raw capture; no trimming."""
        assert match_heading("## Scope  ") == (2, "Scope  ")

    def test_carriage_return_is_not_a_heading(self):
        """A stray carriage return keeps the line from matching."""
        assert match_heading("# Title\r") is None

    def test_get_heading_level(self):
        assert get_heading_level("### Sub") == 3
        assert get_heading_level("not a heading") is None


class TestSplitLines:
    """Tests for line splitting."""

    def test_empty_document(self):
        assert split_lines("") == []

    def test_single_trailing_newline_terminates_last_line(self):
        assert split_lines("a\nb\n") == ["a", "b"]

    def test_blank_lines_kept(self):
        assert split_lines("a\n\nb\n\n") == ["a", "", "b", ""]


class TestSectionize:
    """Tests for sectionize()."""

    def test_empty_document(self):
        """Empty input yields no sections."""
        assert sectionize("") == []

    def test_headingless_document(self):
        """Plain text with no headings yields no sections."""
        assert sectionize("plain text\nwith no headings\n") == []

    def test_levels_and_titles(self):
        """Levels follow the marker count."""
        sections = sectionize("# A\n## B\n### C\n")
        assert [s.level for s in sections] == [1, 2, 3]
        assert [s.title for s in sections] == ["A", "B", "C"]
        assert [s.body for s in sections] == ["", "", ""]

    def test_body_accumulation(self):
        """Body lines are newline-joined up to the next heading."""
        sections = sectionize("# A\nline1\nline2\n# B\nline3\n")
        assert len(sections) == 2
        assert sections[0].body == "line1\nline2"
        assert sections[1].body == "line3"

    def test_indices_follow_document_order(self):
        sections = sectionize("## One\n# Two\n### Three\n## Four")
        assert [s.index for s in sections] == [0, 1, 2, 3]
        assert [s.title for s in sections] == ["One", "Two", "Three", "Four"]

    def test_preamble_discarded(self):
        """Lines before the first heading are dropped."""
        sections = sectionize("Preamble line\n\n# First\nBody\n")
        assert len(sections) == 1
        assert sections[0].title == "First"
        assert "Preamble" not in sections[0].body

    def test_body_kept_verbatim(self):
        """Blank lines and trailing whitespace inside a body are preserved."""
        sections = sectionize("# A\n\n  indented  \n\n\n# B\n")
        assert sections[0].body == "\n  indented  \n\n"

    def test_seven_markers_is_body_text(self):
        sections = sectionize("# A\n####### Not a heading\n")
        assert len(sections) == 1
        assert sections[0].body == "####### Not a heading"

    def test_missing_space_is_body_text(self):
        sections = sectionize("# A\n##NoSpace\n")
        assert len(sections) == 1
        assert sections[0].body == "##NoSpace"

    def test_crlf_lines_are_not_headings(self):
        """Only '\\n' splits lines, so CRLF headings keep their '\\r' and do not match."""
        assert sectionize("# A\r\nbody\r\n") == []

    def test_crlf_body_kept(self):
        sections = sectionize("# A\nline1\r\nline2\r\n")
        assert sections[0].body == "line1\r\nline2\r"

    def test_duplicate_titles_distinct_indices(self):
        """Titles need not be unique; index is the identity."""
        sections = sectionize("### Note\nfirst\n### Note\nsecond\n")
        assert [s.title for s in sections] == ["Note", "Note"]
        assert [s.index for s in sections] == [0, 1]
        assert [s.body for s in sections] == ["first", "second"]

    def test_no_trailing_newline(self):
        sections = sectionize("# A\nlast line")
        assert sections[0].body == "last line"

    def test_policy_scenario(self):
        sections = sectionize(POLICY)
        assert [(s.level, s.title, s.body) for s in sections] == [
            (1, "Title", "Intro text."),
            (2, "Scope", "Scope text."),
            (4, "Details", "Detail text."),
        ]

    def test_sections_are_immutable(self):
        section = sectionize("# A\n")[0]
        with pytest.raises(AttributeError):
            section.title = "B"


class TestReassemble:
    """Tests for rebuilding text from sections."""

    def test_format_heading(self):
        section = sectionize("### Details\n")[0]
        assert format_heading(section) == "### Details"

    @pytest.mark.parametrize("document", [
        "# A\nline1\nline2\n# B\nline3\n",
        POLICY,
        "## Only heading",
        "# A\nx\n\ny\n## B\n  z  \n### C\nw",
    ])
    def test_reassemble_matches_source(self, document):
        """Reassembly reproduces the source modulo the trailing newline."""
        assert reassemble(sectionize(document)) == document.rstrip("\n")

    def test_reassemble_drops_preamble(self):
        document = "Preamble\nmore\n# A\nbody\n"
        assert reassemble(sectionize(document)) == "# A\nbody"

    def test_reassemble_empty(self):
        assert reassemble([]) == ""
