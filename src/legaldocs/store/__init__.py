"""Document store access."""

from .client import DocumentStoreClient

__all__ = ["DocumentStoreClient"]
