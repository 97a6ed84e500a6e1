"""Disclosure state: which sections are shown in full versus collapsed."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from legaldocs.core import Section
from legaldocs.exceptions import SectionIndexError

# Sections at or above this level are always rendered in full.
ALWAYS_VISIBLE_MAX_LEVEL = 2

DisclosureState = Mapping[int, bool]


class DisclosureMode(str, Enum):
    """Derived per-section disclosure state, used as a rendering hint."""

    ALWAYS_VISIBLE = "always_visible"
    COLLAPSED_DEFAULT = "collapsed_default"
    EXPANDED_BY_USER = "expanded_by_user"


@dataclass(frozen=True)
class SectionView:
    """A section paired with its effective visibility."""
    section: Section
    visible: bool
    mode: DisclosureMode


def is_expanded(state: DisclosureState, index: int) -> bool:
    """Return whether a section was expanded, defaulting to False."""
    return bool(state.get(index, False))


def toggle(state: DisclosureState, index: int) -> dict[int, bool]:
    """Flip the expanded flag for one section.

    The input mapping is left untouched.

    Args:
        state: Current disclosure state
        index: Section index to flip

    Returns:
        A new state mapping with the flag at index flipped
    """
    new_state = dict(state)
    new_state[index] = not is_expanded(state, index)
    return new_state


def is_always_visible(section: Section) -> bool:
    """Shallow sections (level 1 and 2) are never collapsed."""
    return section.level <= ALWAYS_VISIBLE_MAX_LEVEL


def is_visible(section: Section, state: DisclosureState) -> bool:
    """Return whether a section's full body should be shown."""
    return is_always_visible(section) or is_expanded(state, section.index)


def disclosure_mode(section: Section, state: DisclosureState) -> DisclosureMode:
    """Derive the disclosure mode of a section from its level and state."""
    if is_always_visible(section):
        return DisclosureMode.ALWAYS_VISIBLE
    if is_expanded(state, section.index):
        return DisclosureMode.EXPANDED_BY_USER
    return DisclosureMode.COLLAPSED_DEFAULT


def section_views(sections: list[Section], state: DisclosureState) -> list[SectionView]:
    """Pair every section with its visibility and mode, in document order."""
    return [
        SectionView(
            section=section,
            visible=is_visible(section, state),
            mode=disclosure_mode(section, state),
        )
        for section in sections
    ]


class DisclosureController:
    """Owns the disclosure state of one document rendering session.

    Each session gets its own controller; state is never shared between
    sessions and is discarded with the controller.
    """

    def __init__(self, sections: list[Section]):
        """Initialize with the sections of the loaded document.

        Args:
            sections: Sections as returned by sectionize()
        """
        self.sections = list(sections)
        self._state: dict[int, bool] = {}

    @property
    def state(self) -> DisclosureState:
        """Read-only view of the current disclosure state."""
        return MappingProxyType(dict(self._state))

    def _section(self, index: int) -> Section:
        if not 0 <= index < len(self.sections):
            raise SectionIndexError(
                f"Section index {index} out of range for document with "
                f"{len(self.sections)} sections"
            )
        return self.sections[index]

    def toggle(self, index: int) -> bool:
        """Flip one section's expanded flag.

        Args:
            index: Section index

        Returns:
            The new expanded flag

        Raises:
            SectionIndexError: If index is not a section of this document
        """
        self._section(index)
        self._state = toggle(self._state, index)
        return self._state[index]

    def is_expanded(self, index: int) -> bool:
        self._section(index)
        return is_expanded(self._state, index)

    def is_visible(self, index: int) -> bool:
        return is_visible(self._section(index), self._state)

    def mode(self, index: int) -> DisclosureMode:
        return disclosure_mode(self._section(index), self._state)

    def views(self) -> list[SectionView]:
        """Return every section with its current visibility and mode."""
        return section_views(self.sections, self._state)

    def reset(self) -> None:
        """Collapse every section back to its default state."""
        self._state = {}
