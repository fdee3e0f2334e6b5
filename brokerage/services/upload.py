"""
Generic image uploads for team photos and listing cover images.
"""

import logging
from typing import Optional

from fastapi import UploadFile

from brokerage.config import get_settings
from brokerage.schemas.upload import UploadResponse
from brokerage.utils.file_utils import FileStorage, FileValidator

logger = logging.getLogger(__name__)

settings = get_settings()


class UploadService:
    def __init__(self, storage: Optional[FileStorage] = None):
        self.storage = storage or FileStorage()

    async def upload_image(self, file: UploadFile, folder: Optional[str] = None) -> UploadResponse:
        """
        Validate and store an image under the upload directory.

        Args:
            file: Uploaded JPG, PNG or WebP image
            folder: Optional sub-folder such as "team" or "properties"

        Returns:
            Public URL and storage details

        Raises:
            FileUploadError: If the folder name or file content is invalid
            UnsupportedFileTypeError: If the type is not allowed
            FileSizeExceededError: If the file is larger than the photo limit
        """
        target_folder = self.storage.normalize_folder(folder)
        content, mime_type, extension = await FileValidator.validate_upload_file(
            file, settings.max_photo_size
        )
        object_path = await self.storage.save_bytes(content, target_folder, extension)

        logger.info(f"Image uploaded to {object_path} ({len(content)} bytes)")
        return UploadResponse(
            url=self.storage.url_for(object_path),
            object_path=object_path,
            size=len(content),
            content_type=mime_type,
        )
