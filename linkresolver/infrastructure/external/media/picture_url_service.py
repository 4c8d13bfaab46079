"""Picture URL service (implements IMediaUrlService).

URLs have the form {media_base_url}/{id}/{seo_filename}{ext}; the
extension is derived from the stored mime type.
"""

from __future__ import annotations

import logging
import mimetypes
from urllib.parse import quote

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from linkresolver.infrastructure.persistence.models import Picture

logger = logging.getLogger(__name__)

# mimetypes returns platform-dependent picks for these; pin the usual ones.
_PREFERRED_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/pjpeg": ".jpg",
    "image/svg+xml": ".svg",
    "image/x-icon": ".ico",
}


def extension_for_mime_type(mime_type: str | None) -> str:
    """Return the file extension (with dot) for mime_type, or '' if unknown."""
    if not mime_type:
        return ""
    mime_type = mime_type.lower().strip()
    if mime_type in _PREFERRED_EXTENSIONS:
        return _PREFERRED_EXTENSIONS[mime_type]
    return mimetypes.guess_extension(mime_type) or ""


class PictureUrlService:
    """Builds picture URLs from the picture table."""

    def __init__(
        self,
        db: AsyncSession,
        media_base_url: str = "/media",
        fallback_url: str = "",
    ) -> None:
        self.db = db
        self.media_base_url = media_base_url.rstrip("/")
        self.fallback_url = fallback_url

    async def get_url(self, picture_id: int) -> str:
        """Return the picture URL, or fallback_url when the picture does not exist."""
        result = await self.db.execute(
            select(Picture.seo_filename, Picture.mime_type).where(Picture.id == picture_id)
        )
        row = result.one_or_none()
        if row is None:
            logger.debug("Picture %s not found; using fallback URL", picture_id)
            return self.fallback_url
        seo_filename, mime_type = row
        filename = quote(seo_filename or str(picture_id), safe="-_.")
        return f"{self.media_base_url}/{picture_id}/{filename}{extension_for_mime_type(mime_type)}"
