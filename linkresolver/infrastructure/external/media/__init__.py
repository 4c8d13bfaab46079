"""Media: picture URL service."""

from linkresolver.infrastructure.external.media.picture_url_service import (
    PictureUrlService,
    extension_for_mime_type,
)

__all__ = ["PictureUrlService", "extension_for_mime_type"]
