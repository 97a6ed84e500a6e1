"""Plain-text rendering of a document view for terminal output."""

from legaldocs.presentation.view import DocumentView


def render_outline(view: DocumentView) -> str:
    """Render one indented line per section with its disclosure marker."""
    if not view.sectioned:
        return "(no sections)"
    lines = []
    for card in view.sections:
        marker = "-" if card.visible else "+"
        indent = "  " * (card.level - 1)
        lines.append(f"{indent}{marker} [{card.index}] {card.title}")
    return "\n".join(lines)


def render_text(view: DocumentView) -> str:
    """Render the full document view as plain text.

    Collapsed sections show their placeholder instead of the body.
    """
    lines = [view.title]
    if view.description:
        lines.append(view.description)
    lines.append(" | ".join(view.chips))
    lines.append("")
    lines.append(view.notice)
    lines.append("")

    if not view.sectioned:
        lines.append(view.content or "")
    else:
        for card in view.sections:
            lines.append(f"{'#' * card.level} {card.title}  ({card.subtitle})")
            if card.visible:
                lines.append(card.body)
            else:
                lines.append(f"{card.placeholder} [{card.toggle_label}]")
            lines.append("")

    lines.append(view.acceptance)
    for link in view.related_links:
        lines.append(f"{link['label']}: {link['href']}")
    return "\n".join(lines)
