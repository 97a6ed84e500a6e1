"""Legal document model as served by the document store."""

from dataclasses import dataclass
from datetime import datetime

from legaldocs.exceptions import DocumentFormatError

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing 'Z' for UTC.

    Args:
        value: Timestamp string from the document store

    Returns:
        The parsed datetime

    Raises:
        DocumentFormatError: If the value is not a valid ISO-8601 timestamp
    """
    if not isinstance(value, str):
        raise DocumentFormatError(f"Invalid timestamp: {value!r}")
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise DocumentFormatError(f"Invalid timestamp: {value!r}") from e


def format_date(value: datetime) -> str:
    """Format a date as day, full month name and year (e.g. '5 March 2024')."""
    return f"{value.day} {MONTH_NAMES[value.month - 1]} {value.year}"


@dataclass
class LegalDocument:
    """A legal or policy document with its raw heading-delimited content."""
    title: str
    content: str
    version: str
    last_updated: datetime
    effective_date: datetime | None = None
    description: str | None = None

    @classmethod
    def from_api(cls, data: dict) -> "LegalDocument":
        """Build a document from the store's JSON payload.

        Args:
            data: The 'data' object of a document store response (camelCase keys)

        Returns:
            The parsed LegalDocument

        Raises:
            DocumentFormatError: If a required field is missing or malformed
        """
        if not isinstance(data, dict):
            raise DocumentFormatError("Document payload must be an object")

        missing = [key for key in ("title", "content", "version", "lastUpdated") if key not in data]
        if missing:
            raise DocumentFormatError(f"Document payload missing fields: {', '.join(missing)}")

        effective = data.get("effectiveDate")
        return cls(
            title=str(data["title"]),
            content=str(data["content"]),
            version=str(data["version"]),
            last_updated=parse_timestamp(data["lastUpdated"]),
            effective_date=parse_timestamp(effective) if effective else None,
            description=data.get("description") or None,
        )

    def __repr__(self) -> str:
        return (
            f"LegalDocument(title={self.title!r}, version={self.version!r}, "
            f"content_length={len(self.content)})"
        )
