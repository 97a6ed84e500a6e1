#!/usr/bin/env python3
"""CLI for sectioning a legal document and printing it."""

import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

from dotenv import load_dotenv

from legaldocs.config import get_entry, load_registry
from legaldocs.core import LegalDocument
from legaldocs.disclosure import DisclosureController
from legaldocs.exceptions import LegalDocsError
from legaldocs.presentation import build_document_view, render_outline, render_text
from legaldocs.sectioning import sectionize
from legaldocs.store import DocumentStoreClient

load_dotenv()


def load_local_document(path: Path, version: str) -> LegalDocument:
    """Wrap a local markdown file as a LegalDocument."""
    content = path.read_text(encoding="utf-8")
    modified = datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
    return LegalDocument(
        title=path.stem.replace("-", " ").replace("_", " ").title(),
        content=content,
        version=version,
        last_updated=modified,
    )


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Section a legal document and print it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s terms.md                       Print a local file
  %(prog)s terms.md --expand 3 --expand 5 Expand sections 3 and 5
  %(prog)s --slug privacy --outline       Outline a registered document
""",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "file", nargs="?", type=Path,
        help="Path to a local markdown document"
    )
    source.add_argument(
        "--slug",
        help="Registry slug of a document to fetch from the store"
    )
    parser.add_argument(
        "--registry", type=Path,
        help="Path to document registry (default: config/documents.yaml)"
    )
    parser.add_argument(
        "--expand", type=int, action="append", default=[], metavar="INDEX",
        help="Expand a collapsed section by index (repeatable)"
    )
    parser.add_argument(
        "--outline",
        action="store_true",
        help="Print only the section outline"
    )
    parser.add_argument(
        "--version-label",
        default="local",
        help="Version shown for local files (default: local)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    title = None
    description = None
    related_links = None
    try:
        if args.slug:
            entry = get_entry(load_registry(args.registry), args.slug)
            document = DocumentStoreClient().fetch(entry.endpoint, title=entry.title)
            title = entry.title
            description = entry.description
            related_links = entry.related_links
        else:
            document = load_local_document(args.file, args.version_label)

        controller = DisclosureController(sectionize(document.content))
        for index in sorted(set(args.expand)):
            controller.toggle(index)
    except (LegalDocsError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    view = build_document_view(
        document,
        controller,
        title=title,
        description=description,
        related_links=related_links,
    )
    print(render_outline(view) if args.outline else render_text(view))


if __name__ == "__main__":
    main()
