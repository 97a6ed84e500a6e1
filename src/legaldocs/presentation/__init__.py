"""View models handed to the external renderer."""

from .text import render_outline, render_text
from .view import (
    COLLAPSED_PLACEHOLDER,
    SHOW_LESS_LABEL,
    SHOW_MORE_LABEL,
    DocumentView,
    SectionCard,
    acceptance_notice,
    build_document_view,
    metadata_chips,
    section_cards,
)

__all__ = [
    "COLLAPSED_PLACEHOLDER",
    "SHOW_LESS_LABEL",
    "SHOW_MORE_LABEL",
    "DocumentView",
    "SectionCard",
    "acceptance_notice",
    "build_document_view",
    "metadata_chips",
    "render_outline",
    "render_text",
    "section_cards",
]
