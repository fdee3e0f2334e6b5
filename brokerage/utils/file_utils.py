"""
File upload utilities for handling image validation and storage.
Provides common file operations and validation functions.
"""

import io
import logging
import re
import uuid
from pathlib import Path
from typing import Optional, Tuple
from PIL import Image, UnidentifiedImageError
import aiofiles
from fastapi import UploadFile

from brokerage.config import get_settings
from brokerage.utils.exceptions import (
    FileUploadError,
    FileSizeExceededError,
    UnsupportedFileTypeError,
)

logger = logging.getLogger(__name__)

settings = get_settings()

FOLDER_PATTERN = re.compile(r"^[a-z0-9][a-z0-9_\-/]{0,99}$")


class FileValidator:
    """Utility class for file validation operations."""

    # Supported image formats and their MIME types
    SUPPORTED_FORMATS = {
        'image/jpeg': ['.jpg', '.jpeg'],
        'image/png': ['.png'],
        'image/webp': ['.webp']
    }

    # Pillow format names per MIME type
    PIL_FORMATS = {
        'image/jpeg': 'JPEG',
        'image/png': 'PNG',
        'image/webp': 'WEBP'
    }

    # Image dimension constraints
    MIN_WIDTH = 100
    MIN_HEIGHT = 100
    MAX_WIDTH = 10000
    MAX_HEIGHT = 10000

    @classmethod
    def supported_types(cls) -> list:
        return [t for t in cls.SUPPORTED_FORMATS if t in settings.allowed_file_types]

    @classmethod
    def validate_file_extension(cls, filename: str) -> str:
        """
        Validate file extension.

        Args:
            filename: Name of the file

        Returns:
            Lowercase file extension

        Raises:
            UnsupportedFileTypeError: If extension is not supported
        """
        if not filename:
            raise FileUploadError("Filename is required")

        extension = Path(filename).suffix.lower()

        supported_extensions = []
        for extensions in cls.SUPPORTED_FORMATS.values():
            supported_extensions.extend(extensions)

        if extension not in supported_extensions:
            raise UnsupportedFileTypeError(extension or "(none)", supported_extensions)

        return extension

    @classmethod
    def validate_mime_type(cls, mime_type: str) -> str:
        """
        Validate MIME type against the configured allow-list.

        Raises:
            UnsupportedFileTypeError: If MIME type is not supported
        """
        supported = cls.supported_types()
        if mime_type not in supported:
            raise UnsupportedFileTypeError(mime_type or "(none)", supported)
        return mime_type

    @classmethod
    def validate_file_size(cls, file_size: int, max_size: Optional[int] = None) -> int:
        """
        Validate file size.

        Args:
            file_size: Size of the file in bytes
            max_size: Maximum allowed size in bytes (optional)

        Returns:
            Validated file size

        Raises:
            FileUploadError: If the file is empty
            FileSizeExceededError: If file size exceeds limit
        """
        if file_size <= 0:
            raise FileUploadError("File is empty")

        max_allowed = max_size or settings.max_file_size
        if file_size > max_allowed:
            raise FileSizeExceededError(file_size, max_allowed)

        return file_size

    @classmethod
    def validate_image_content(cls, content: bytes, mime_type: str) -> Tuple[int, int]:
        """
        Check that the bytes are a real image of the declared type.

        Returns:
            Tuple of (width, height)

        Raises:
            FileUploadError: If the content is not a readable image of that type
        """
        try:
            with Image.open(io.BytesIO(content)) as img:
                img.verify()
            # verify() leaves the image unusable; reopen for size and format
            with Image.open(io.BytesIO(content)) as img:
                width, height = img.size
                pil_format = img.format or ""
        except (UnidentifiedImageError, OSError, SyntaxError) as e:
            raise FileUploadError(f"Invalid image file: {e}")

        expected = cls.PIL_FORMATS.get(mime_type)
        if expected and pil_format != expected:
            raise FileUploadError(
                f"Image format '{pil_format.lower()}' doesn't match MIME type '{mime_type}'"
            )

        if width < cls.MIN_WIDTH or height < cls.MIN_HEIGHT:
            raise FileUploadError(
                f"Image is {width}x{height}px; minimum is {cls.MIN_WIDTH}x{cls.MIN_HEIGHT}px"
            )
        if width > cls.MAX_WIDTH or height > cls.MAX_HEIGHT:
            raise FileUploadError(
                f"Image is {width}x{height}px; maximum is {cls.MAX_WIDTH}x{cls.MAX_HEIGHT}px"
            )

        return width, height

    @classmethod
    async def validate_upload_file(
        cls,
        file: UploadFile,
        max_size: Optional[int] = None
    ) -> Tuple[bytes, str, str]:
        """
        Comprehensive validation of uploaded file.

        Args:
            file: FastAPI UploadFile object
            max_size: Size limit in bytes, defaults to the configured upload limit

        Returns:
            Tuple of (content, mime_type, extension)
        """
        extension = cls.validate_file_extension(file.filename or "")
        mime_type = cls.validate_mime_type(file.content_type or "")

        if extension not in cls.SUPPORTED_FORMATS.get(mime_type, []):
            raise FileUploadError(
                f"File extension '{extension}' doesn't match MIME type '{mime_type}'"
            )

        await file.seek(0)
        content = await file.read()
        await file.seek(0)

        cls.validate_file_size(len(content), max_size)
        cls.validate_image_content(content, mime_type)

        return content, mime_type, extension


class FileStorage:
    """Local disk storage for uploads, served under the upload URL prefix."""

    def __init__(self, base_dir: Optional[Path] = None, url_prefix: Optional[str] = None):
        self.base_dir = Path(base_dir or settings.upload_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)
        self.url_prefix = (url_prefix or settings.upload_url_prefix).rstrip("/")

    @staticmethod
    def normalize_folder(folder: Optional[str]) -> str:
        """
        Validate a caller-supplied folder name.

        Raises:
            FileUploadError: If the folder contains unsafe characters
        """
        folder = (folder or "general").strip().strip("/").lower()
        if not FOLDER_PATTERN.match(folder) or ".." in folder:
            raise FileUploadError(f"Invalid folder '{folder}'")
        return folder

    @staticmethod
    def generate_unique_filename(extension: str) -> str:
        return f"{uuid.uuid4()}{extension}"

    def get_property_folder(self, property_id: uuid.UUID) -> str:
        return f"properties/{property_id}"

    def url_for(self, object_path: str) -> str:
        return f"{self.url_prefix}/{object_path}"

    def path_for_url(self, url: Optional[str]) -> Optional[Path]:
        """
        Map a public upload URL back to its file on disk.

        Returns:
            Path inside the upload directory, or None for external URLs
        """
        if not url or not url.startswith(self.url_prefix + "/"):
            return None
        relative = url[len(self.url_prefix) + 1:]
        candidate = (self.base_dir / relative).resolve()
        if self.base_dir.resolve() not in candidate.parents:
            return None
        return candidate

    async def save_bytes(self, content: bytes, folder: str, extension: str) -> str:
        """
        Write content to a new file under the given folder.

        Returns:
            Object path relative to the upload directory

        Raises:
            FileUploadError: If the file cannot be written
        """
        object_path = f"{folder}/{self.generate_unique_filename(extension)}"
        file_path = self.base_dir / object_path
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(file_path, 'wb') as f:
                await f.write(content)
        except OSError as e:
            logger.error(f"Failed to save upload to {file_path}: {e}")
            raise FileUploadError("Failed to save file")

        logger.debug(f"Saved {len(content)} bytes to {object_path}")
        return object_path

    def delete_url(self, url: Optional[str]) -> bool:
        """
        Delete the local file behind an upload URL.

        Returns:
            True if a file was removed
        """
        file_path = self.path_for_url(url)
        if file_path is None:
            return False
        try:
            if file_path.exists():
                file_path.unlink()
                logger.debug(f"Deleted upload {file_path}")
                return True
            return False
        except OSError as e:
            logger.warning(f"Failed to delete upload {file_path}: {e}")
            return False


class ImageProcessor:
    """Utility class for image processing operations."""

    @staticmethod
    def create_thumbnail(content: bytes, size: int) -> bytes:
        """
        Create a JPEG thumbnail that fits in a size x size box.

        Args:
            content: Original image bytes
            size: Longest edge of the thumbnail in pixels

        Returns:
            JPEG-encoded thumbnail bytes
        """
        with Image.open(io.BytesIO(content)) as img:
            img.thumbnail((size, size), Image.Resampling.LANCZOS)
            if img.mode != "RGB":
                background = Image.new("RGB", img.size, (255, 255, 255))
                rgba = img.convert("RGBA")
                background.paste(rgba, mask=rgba.split()[-1])
                img = background
            buffer = io.BytesIO()
            img.save(buffer, format="JPEG", optimize=True, quality=85)
            return buffer.getvalue()
