"""Section dataclass for sectioned document content."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Section:
    """A heading-delimited section of a legal document."""
    title: str
    level: int
    body: str
    index: int

    def __repr__(self) -> str:
        body_preview = self.body[:100] + "..." if len(self.body) > 100 else self.body
        return (
            f"Section(index={self.index!r}, level={self.level!r}, "
            f"title={self.title!r}, body={body_preview!r})"
        )
