"""Core domain models."""

from .document import LegalDocument, format_date, parse_timestamp
from .section import Section

__all__ = ["LegalDocument", "Section", "format_date", "parse_timestamp"]
