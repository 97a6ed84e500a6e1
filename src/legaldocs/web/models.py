"""Pydantic models for the web API."""

from datetime import datetime

from pydantic import BaseModel, Field

from legaldocs.disclosure import DisclosureMode
from legaldocs.presentation import DocumentView


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str = "ok"
    version: str = "0.1.0"


class RelatedLink(BaseModel):
    label: str
    href: str


class DocumentSummary(BaseModel):
    """A registry entry as listed by the API."""

    slug: str
    title: str
    description: str | None = None
    related_links: list[RelatedLink] = Field(default_factory=list)


class SectionResponse(BaseModel):
    """One section with its disclosure state."""

    index: int
    title: str
    level: int = Field(..., ge=1, le=6)
    body: str
    subtitle: str
    visible: bool
    mode: DisclosureMode
    toggle_label: str
    placeholder: str | None = None
    accent: str


class DocumentViewResponse(BaseModel):
    """A sectioned (or unsectioned) document ready for rendering."""

    title: str
    description: str | None = None
    version: str
    last_updated: datetime
    effective_date: datetime | None = None
    chips: list[str]
    notice: str
    acceptance: str
    sectioned: bool
    content: str | None = None
    sections: list[SectionResponse] = Field(default_factory=list)
    related_links: list[RelatedLink] = Field(default_factory=list)

    @classmethod
    def from_view(cls, view: DocumentView) -> "DocumentViewResponse":
        return cls(
            title=view.title,
            description=view.description,
            version=view.version,
            last_updated=view.last_updated,
            effective_date=view.effective_date,
            chips=view.chips,
            notice=view.notice,
            acceptance=view.acceptance,
            sectioned=view.sectioned,
            content=view.content,
            sections=[
                SectionResponse(
                    index=card.index,
                    title=card.title,
                    level=card.level,
                    body=card.body,
                    subtitle=card.subtitle,
                    visible=card.visible,
                    mode=card.mode,
                    toggle_label=card.toggle_label,
                    placeholder=card.placeholder,
                    accent=card.accent,
                )
                for card in view.sections
            ],
            related_links=[RelatedLink(**link) for link in view.related_links],
        )


class CreateSessionRequest(BaseModel):
    """Request body for opening a document rendering session."""

    slug: str = Field(..., min_length=1, description="Registry slug of the document")


class SessionResponse(BaseModel):
    """A session id with the current view of its document."""

    session_id: str
    document: DocumentViewResponse
