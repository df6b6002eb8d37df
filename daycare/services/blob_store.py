"""
Photo blob storage.

Photo URLs are download links of the form
  https://<host>/v0/b/<bucket>/o/<url-encoded object path>?alt=media&token=...
and the object path is recovered by URL-decoding the segment after "/o/".
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional
from urllib.parse import unquote

logger = logging.getLogger(__name__)


class BlobNotFound(Exception):
    pass


def storage_path_from_url(url: Optional[str]) -> Optional[str]:
    """Return the decoded object path embedded in a download URL, or None if it has none."""
    if not url:
        return None
    parts = url.split("/o/", 1)
    if len(parts) < 2:
        return None
    path_part = parts[1].split("?", 1)[0]
    if not path_part:
        return None
    return unquote(path_part)


class LocalBlobStore:
    """Blob store rooted at a directory; object paths are relative to it."""

    def __init__(self, root: str) -> None:
        self.root = Path(root).resolve()

    def _resolve(self, object_path: str) -> Path:
        target = (self.root / object_path).resolve()
        if self.root != target and self.root not in target.parents:
            raise ValueError(f"Object path escapes storage root: {object_path}")
        return target

    async def delete(self, object_path: str) -> None:
        target = self._resolve(object_path)
        try:
            await asyncio.to_thread(target.unlink)
        except FileNotFoundError as e:
            raise BlobNotFound(f"No such object: {object_path}") from e
        logger.debug("Deleted blob %s", object_path)
