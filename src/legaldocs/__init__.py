"""legaldocs: section legal documents and control their disclosure."""

from legaldocs.core import LegalDocument, Section, format_date
from legaldocs.disclosure import (
    DisclosureController,
    DisclosureMode,
    SectionView,
    is_expanded,
    is_visible,
    toggle,
)
from legaldocs.exceptions import (
    DocumentFetchError,
    DocumentFormatError,
    DocumentNotFoundError,
    LegalDocsError,
    RegistryError,
    SectionIndexError,
    SessionNotFoundError,
)
from legaldocs.sectioning import sectionize

__version__ = "0.1.0"

__all__ = [
    "DisclosureController",
    "DisclosureMode",
    "DocumentFetchError",
    "DocumentFormatError",
    "DocumentNotFoundError",
    "LegalDocsError",
    "LegalDocument",
    "RegistryError",
    "Section",
    "SectionIndexError",
    "SectionView",
    "SessionNotFoundError",
    "format_date",
    "is_expanded",
    "is_visible",
    "sectionize",
    "toggle",
]
