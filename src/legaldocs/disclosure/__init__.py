"""Section disclosure (expand/collapse) state."""

from .controller import (
    ALWAYS_VISIBLE_MAX_LEVEL,
    DisclosureController,
    DisclosureMode,
    DisclosureState,
    SectionView,
    disclosure_mode,
    is_always_visible,
    is_expanded,
    is_visible,
    section_views,
    toggle,
)

__all__ = [
    "ALWAYS_VISIBLE_MAX_LEVEL",
    "DisclosureController",
    "DisclosureMode",
    "DisclosureState",
    "SectionView",
    "disclosure_mode",
    "is_always_visible",
    "is_expanded",
    "is_visible",
    "section_views",
    "toggle",
]
