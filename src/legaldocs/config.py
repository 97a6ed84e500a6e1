"""Configuration and document registry for legaldocs."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from legaldocs.exceptions import DocumentNotFoundError, RegistryError

# Default paths relative to project root
DEFAULT_REGISTRY_PATH = Path(__file__).parent.parent.parent / "config" / "documents.yaml"

DEFAULT_STORE_URL = "http://127.0.0.1:3000"
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_USER_AGENT = "legaldocs/0.1"
DEFAULT_MAX_SESSIONS = 1000


def get_store_url() -> str:
    """Base URL of the document store (LEGALDOCS_STORE_URL)."""
    return os.getenv("LEGALDOCS_STORE_URL", DEFAULT_STORE_URL).rstrip("/")


def get_fetch_timeout() -> float:
    """Document fetch timeout in seconds (LEGALDOCS_FETCH_TIMEOUT_S)."""
    return float(os.getenv("LEGALDOCS_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))


def get_user_agent() -> str:
    return os.getenv("LEGALDOCS_USER_AGENT", DEFAULT_USER_AGENT)


def get_max_sessions() -> int:
    """Maximum live web sessions before the oldest is evicted (LEGALDOCS_MAX_SESSIONS)."""
    return int(os.getenv("LEGALDOCS_MAX_SESSIONS", str(DEFAULT_MAX_SESSIONS)))


def get_registry_path() -> Path:
    """Path to the document registry (LEGALDOCS_REGISTRY_PATH)."""
    env_path = os.getenv("LEGALDOCS_REGISTRY_PATH")
    return Path(env_path) if env_path else DEFAULT_REGISTRY_PATH


@dataclass
class DocumentEntry:
    """A legal document known to the registry."""
    slug: str
    title: str
    endpoint: str
    description: str | None = None
    related_links: list[dict] = field(default_factory=list)


def _parse_link(link, slug: str) -> dict:
    if not isinstance(link, dict) or not link.get("label") or not link.get("href"):
        raise RegistryError(f"Related link for '{slug}' needs 'label' and 'href': {link}")
    return {"label": link["label"], "href": link["href"]}


def load_registry(registry_path: Path | None = None) -> dict[str, DocumentEntry]:
    """Load the document registry from a YAML file.

    Args:
        registry_path: Path to registry file, defaults to config/documents.yaml

    Returns:
        Mapping of slug to DocumentEntry, in file order

    Raises:
        FileNotFoundError: If the registry file does not exist
        RegistryError: If the file is not valid YAML, is not a mapping, or an
            entry or related link is missing a required key
    """
    path = registry_path or get_registry_path()
    if not path.exists():
        raise FileNotFoundError(f"Registry file not found: {path}")

    with open(path) as f:
        try:
            config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise RegistryError(f"Invalid YAML in registry {path}: {e}") from e

    if not config:
        return {}
    if not isinstance(config, dict):
        raise RegistryError(f"Registry {path} must be a mapping with a 'documents' list")

    documents = config.get("documents") or []
    if not isinstance(documents, list):
        raise RegistryError(f"'documents' in {path} must be a list")

    registry: dict[str, DocumentEntry] = {}
    for entry in documents:
        if not isinstance(entry, dict):
            raise RegistryError(f"Registry entry must be a mapping: {entry}")
        for key in ("slug", "title", "endpoint"):
            if not entry.get(key):
                raise RegistryError(f"Registry entry missing '{key}': {entry}")
        registry[entry["slug"]] = DocumentEntry(
            slug=entry["slug"],
            title=entry["title"],
            endpoint=entry["endpoint"],
            description=entry.get("description"),
            related_links=[
                _parse_link(link, entry["slug"])
                for link in entry.get("related_links") or []
            ],
        )
    return registry


def get_entry(registry: dict[str, DocumentEntry], slug: str) -> DocumentEntry:
    """Look up a registry entry by slug.

    Raises:
        DocumentNotFoundError: If no document is registered under slug
    """
    try:
        return registry[slug]
    except KeyError:
        raise DocumentNotFoundError(f"Unknown document: {slug}") from None
