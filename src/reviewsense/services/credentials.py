"""Durable storage for the Hugging Face access token."""

import logging
from typing import Optional

from diskcache import Cache

from ..core.config import settings
from ..core.constants import StorageConstants

logger = logging.getLogger(__name__)


class CredentialStore:
    """Single-key persistent store backed by a diskcache directory."""

    def __init__(self, directory: Optional[str] = None, key: str = StorageConstants.CREDENTIAL_KEY):
        self.directory = directory or settings.credential_dir
        self.key = key
        self._cache = Cache(self.directory)

    def load(self) -> Optional[str]:
        value = self._cache.get(self.key)
        return value or None

    def save(self, value: str) -> None:
        self._cache.set(self.key, value)
        logger.debug(f"Stored credential under '{self.key}'")

    def clear(self) -> None:
        self._cache.delete(self.key)

    def close(self) -> None:
        self._cache.close()
