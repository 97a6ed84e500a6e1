"""HTTP client for the external legal document store."""

import logging

import requests

from legaldocs.config import get_fetch_timeout, get_store_url, get_user_agent
from legaldocs.core import LegalDocument
from legaldocs.exceptions import DocumentFetchError, DocumentFormatError

logger = logging.getLogger(__name__)


class DocumentStoreClient:
    """Fetches legal documents from the document store API.

    The store answers with an envelope of the form
    {"success": bool, "data": {...}, "message": str}.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: Store base URL, defaults to LEGALDOCS_STORE_URL
            timeout: Request timeout in seconds, defaults to LEGALDOCS_FETCH_TIMEOUT_S
            session: Optional requests session to reuse connections
        """
        self.base_url = (base_url or get_store_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else get_fetch_timeout()
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": get_user_agent()})

    def _url(self, endpoint: str) -> str:
        if endpoint.startswith("http://") or endpoint.startswith("https://"):
            return endpoint
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def fetch(self, endpoint: str, title: str = "document") -> LegalDocument:
        """Fetch and parse one document.

        Args:
            endpoint: Store endpoint path (or absolute URL)
            title: Human-readable document title used in error messages

        Returns:
            The fetched LegalDocument

        Raises:
            DocumentFetchError: On network failure, non-2xx status, or an
                unsuccessful envelope
            DocumentFormatError: If the response body is not a valid document
        """
        url = self._url(endpoint)
        logger.debug(f"Fetching {title} from {url}")

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            logger.warning(f"Timed out fetching {title} from {url}")
            raise DocumentFetchError(f"Failed to fetch {title}: timeout") from e
        except requests.exceptions.RequestException as e:
            logger.warning(f"Error fetching {title} from {url}: {e}")
            raise DocumentFetchError(f"Failed to fetch {title}") from e

        if not response.ok:
            logger.warning(f"Store returned {response.status_code} for {url}")
            raise DocumentFetchError(f"Failed to fetch {title}")

        try:
            payload = response.json()
        except ValueError as e:
            raise DocumentFormatError(f"Store returned invalid JSON for {title}") from e

        if not isinstance(payload, dict):
            raise DocumentFormatError(f"Store returned unexpected payload for {title}")

        if not payload.get("success"):
            raise DocumentFetchError(payload.get("message") or f"Failed to load {title}")

        document = LegalDocument.from_api(payload.get("data"))
        logger.debug(f"Fetched {title} version {document.version}")
        return document

    def close(self) -> None:
        """Release pooled connections held by the underlying session."""
        self.session.close()
