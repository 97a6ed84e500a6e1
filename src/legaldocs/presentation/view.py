"""Renderer-facing view model for a sectioned legal document."""

from dataclasses import dataclass, field
from datetime import datetime

from legaldocs.core import LegalDocument, format_date
from legaldocs.disclosure import DisclosureController, DisclosureMode
from legaldocs.sectioning import sectionize

SHOW_MORE_LABEL = "Show More"
SHOW_LESS_LABEL = "Show Less"
COLLAPSED_PLACEHOLDER = 'Click "Show More" to view this section...'

# Card accent by heading level; deeper levels share the neutral accent.
LEVEL_ACCENTS = {1: "primary", 2: "secondary"}
DEFAULT_ACCENT = "neutral"


@dataclass(frozen=True)
class SectionCard:
    """One section as presented to the renderer."""
    index: int
    title: str
    level: int
    body: str
    subtitle: str
    visible: bool
    mode: DisclosureMode
    toggle_label: str
    placeholder: str | None
    accent: str


@dataclass
class DocumentView:
    """Everything a renderer needs to draw one legal document."""
    title: str
    description: str | None
    version: str
    last_updated: datetime
    effective_date: datetime | None
    chips: list[str]
    notice: str
    acceptance: str
    sectioned: bool
    content: str | None = None
    sections: list[SectionCard] = field(default_factory=list)
    related_links: list[dict] = field(default_factory=list)


def metadata_chips(document: LegalDocument) -> list[str]:
    """Version, last-updated and (when set) effective-date labels."""
    chips = [
        f"Version {document.version}",
        f"Last updated: {format_date(document.last_updated)}",
    ]
    if document.effective_date is not None:
        chips.append(f"Effective: {format_date(document.effective_date)}")
    return chips


def acceptance_notice(title: str) -> str:
    return (
        f"By accessing or using our services, you agree to be bound by this "
        f"{title}. Please read it carefully."
    )


def section_cards(controller: DisclosureController) -> list[SectionCard]:
    """Build a card per section from the controller's current state."""
    cards = []
    for view in controller.views():
        section = view.section
        expanded = view.mode is DisclosureMode.EXPANDED_BY_USER
        cards.append(SectionCard(
            index=section.index,
            title=section.title,
            level=section.level,
            body=section.body,
            subtitle=f"Section {section.index + 1}",
            visible=view.visible,
            mode=view.mode,
            toggle_label=SHOW_LESS_LABEL if expanded else SHOW_MORE_LABEL,
            placeholder=None if view.visible else COLLAPSED_PLACEHOLDER,
            accent=LEVEL_ACCENTS.get(section.level, DEFAULT_ACCENT),
        ))
    return cards


def build_document_view(
    document: LegalDocument,
    controller: DisclosureController | None = None,
    title: str | None = None,
    description: str | None = None,
    related_links: list[dict] | None = None,
) -> DocumentView:
    """Build the view model for a document.

    When the document has no heading lines the whole content is returned
    as a single unsectioned block and no disclosure state is consulted.

    Args:
        document: The fetched document
        controller: Disclosure state for this session; a fresh one is
            created from the document when omitted
        title: Fallback title used when the document has none
        description: Fallback description used when the document has none
        related_links: Links shown beneath the document

    Returns:
        The DocumentView for the renderer
    """
    display_title = document.title or title or ""
    view = DocumentView(
        title=display_title,
        description=document.description or description,
        version=document.version,
        last_updated=document.last_updated,
        effective_date=document.effective_date,
        chips=metadata_chips(document),
        notice=acceptance_notice(title or display_title),
        acceptance=f"Last updated: {format_date(document.last_updated)}",
        sectioned=False,
        related_links=list(related_links or []),
    )

    if controller is None:
        controller = DisclosureController(sectionize(document.content))

    if not controller.sections:
        view.content = document.content
        return view

    view.sectioned = True
    view.sections = section_cards(controller)
    return view
