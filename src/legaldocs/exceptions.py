"""Custom exceptions for legaldocs."""


class LegalDocsError(Exception):
    """Base exception for legaldocs operations."""


class DocumentFetchError(LegalDocsError):
    """Error while fetching a document from the document store."""


class DocumentFormatError(LegalDocsError):
    """Document store returned data that cannot be read as a legal document."""


class DocumentNotFoundError(LegalDocsError):
    """No document is registered under the requested slug."""


class SectionIndexError(LegalDocsError, IndexError):
    """Section index does not belong to the document being rendered."""


class SessionNotFoundError(LegalDocsError):
    """No disclosure session exists under the requested id."""


class RegistryError(LegalDocsError):
    """Document registry file is malformed."""
