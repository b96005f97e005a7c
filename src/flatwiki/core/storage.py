"""Storage abstraction for wiki pages."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from flatwiki.core.models import Page
from flatwiki.core.routing import is_valid_title

logger = logging.getLogger(__name__)


class Storage(ABC):
    """Abstract base class for page storage."""

    @abstractmethod
    async def load(self, title: str) -> Page | None:
        """Load a page by title. Returns None if it does not exist."""
        ...

    @abstractmethod
    async def save(self, title: str, body: bytes) -> Page:
        """Replace the stored body of a page, creating it if needed."""
        ...


class FileStorage(Storage):
    """Flat-file storage implementation.

    Each page is one file named ``<title>.txt`` holding the raw body, with no
    header or metadata. Saving overwrites the whole file; concurrent saves of
    the same title are not serialized, so the last write to finish wins.
    """

    SUFFIX = ".txt"
    DIR_MODE = 0o755

    def __init__(self, base_path: Path):
        self.base_path = base_path

    def _get_path(self, title: str) -> Path:
        """Get full path for a page."""
        if not is_valid_title(title):
            raise ValueError(f"Invalid page title: {title!r}")
        return self.base_path / (title + self.SUFFIX)

    async def load(self, title: str) -> Page | None:
        """Load a page.

        Missing and unreadable files are both reported as a missing page.
        """
        path = self._get_path(title)
        try:
            body = path.read_bytes()
        except OSError as e:
            logger.debug("Page %s not loaded: %s", title, e)
            return None
        return Page(title=title, body=body)

    async def save(self, title: str, body: bytes) -> Page:
        """Save a page.

        Raises:
            OSError: If the directory cannot be created or the write fails.
        """
        path = self._get_path(title)
        page = Page(title=title, body=body)
        self.base_path.mkdir(mode=self.DIR_MODE, parents=True, exist_ok=True)
        path.write_bytes(page.body)
        logger.info("Saved page %s (%d bytes)", title, len(page.body))
        return page
