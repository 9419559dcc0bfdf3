# =============================================================================
# core/services/storage_service.py - Supabase Storage Operations
# =============================================================================
# Handles look reference image uploads to Supabase Storage.
# =============================================================================

import logging
import posixpath
import re
import time

from lib.supabase_client import SupabaseClient
from app.config import settings
from app.exceptions import FileTooLargeError, InvalidFileTypeError, StorageUploadError

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def _safe_filename(filename: str) -> str:
    """Strip directories and characters storage paths don't like."""
    name = posixpath.basename(filename.replace("\\", "/")) or "image"
    return _UNSAFE_CHARS.sub("_", name)


class StorageService:
    """
    Service for Supabase Storage operations.

    Look images live at:
        productions/{production_id}/looks/{look_id}/{timestamp}_{filename}
    The timestamp keeps replaced images from being served from cache.
    """

    @staticmethod
    def validate_image(content: bytes, filename: str, content_type: str | None) -> None:
        """
        Check an uploaded image against the allowed types and size limit.

        Raises:
            InvalidFileTypeError: If the content type isn't an allowed image type
            FileTooLargeError: If the file is larger than MAX_IMAGE_SIZE_MB
        """
        allowed = settings.allowed_image_types_list
        if (content_type or "").lower() not in allowed:
            raise InvalidFileTypeError(filename, allowed)

        if len(content) > settings.max_image_size_bytes:
            raise FileTooLargeError(
                size_mb=len(content) / (1024 * 1024),
                max_mb=settings.MAX_IMAGE_SIZE_MB,
            )

    @staticmethod
    def upload_look_image(
        production_id: str,
        look_id: str,
        content: bytes,
        filename: str,
        content_type: str | None,
    ) -> str:
        """
        Upload a look image and return its public URL.

        Args:
            production_id: Production UUID
            look_id: Look UUID
            content: Image bytes
            filename: Original filename
            content_type: MIME type reported by the client

        Returns:
            Public URL of the stored image

        Raises:
            InvalidFileTypeError / FileTooLargeError: Rejected upload
            StorageUploadError: If upload fails
        """
        StorageService.validate_image(content, filename, content_type)

        client = SupabaseClient.get_client()
        bucket = client.storage.from_(settings.LOOK_IMAGES_BUCKET)
        path = (
            f"productions/{production_id}/looks/{look_id}/"
            f"{int(time.time())}_{_safe_filename(filename)}"
        )

        try:
            bucket.upload(
                path=path,
                file=content,
                file_options={"content-type": content_type, "upsert": "true"}
            )
            public_url = bucket.get_public_url(path)

        except Exception as e:
            logger.error(f"Storage upload failed: {e}")
            raise StorageUploadError(str(e))

        logger.info(f"Uploaded look image to storage: {path}")
        return public_url
