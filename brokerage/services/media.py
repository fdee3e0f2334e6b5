"""
Media service for listing galleries.
Handles uploads with thumbnails, video links, the featured image and ordering.
"""

import logging
import uuid
from typing import List, Optional

from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from brokerage.config import get_settings
from brokerage.models.media import PropertyMedia, MediaType
from brokerage.repositories.media import MediaRepository
from brokerage.repositories.property import PropertyRepository
from brokerage.schemas.media import MediaCreate, MediaUpdate
from brokerage.utils.exceptions import (
    BadRequestError,
    BusinessRuleViolationError,
    MediaNotFoundError,
    PropertyNotFoundError,
    ValidationError,
)
from brokerage.utils.file_utils import FileStorage, FileValidator, ImageProcessor
from brokerage.utils.ordering import validate_full_order
from brokerage.utils.video import parse_video_url

logger = logging.getLogger(__name__)

settings = get_settings()


class MediaService:
    """Service for gallery management on a listing."""

    def __init__(self, db_session: AsyncSession, storage: Optional[FileStorage] = None):
        self.db = db_session
        self.media_repo = MediaRepository(db_session)
        self.property_repo = PropertyRepository(db_session)
        self.storage = storage or FileStorage()

    async def _ensure_property(self, property_id: uuid.UUID) -> None:
        if not await self.property_repo.exists(property_id):
            raise PropertyNotFoundError(str(property_id))

    async def get_media(self, media_id: uuid.UUID) -> PropertyMedia:
        media = await self.media_repo.get_by_id(media_id)
        if not media:
            raise MediaNotFoundError(str(media_id))
        return media

    async def list_media(self, property_id: uuid.UUID) -> List[PropertyMedia]:
        """
        Get a listing's gallery in display order.

        Raises:
            PropertyNotFoundError: If the listing doesn't exist
        """
        await self._ensure_property(property_id)
        return await self.media_repo.get_by_property_id(property_id)

    async def add_media(self, property_id: uuid.UUID, media_data: MediaCreate) -> PropertyMedia:
        """
        Attach a media item by URL.
        Video platform and id are derived from the URL when not supplied.

        Args:
            property_id: Listing to attach to
            media_data: Media fields

        Returns:
            Created media row, appended to the end of the gallery

        Raises:
            PropertyNotFoundError: If the listing doesn't exist
            ValidationError: If a video URL is not a YouTube or Vimeo link
        """
        await self._ensure_property(property_id)

        data = media_data.model_dump()
        if media_data.media_type == MediaType.VIDEO:
            if not media_data.platform or not media_data.video_id:
                video = parse_video_url(media_data.url)
                if video is None:
                    raise ValidationError(
                        "Unrecognised video URL; use a YouTube or Vimeo link",
                        field_errors=[{"field": "url", "message": "Unrecognised video URL"}]
                    )
                data["platform"] = media_data.platform or video.platform
                data["video_id"] = media_data.video_id or video.video_id
        else:
            data["platform"] = None
            data["video_id"] = None

        return await self._create(property_id, data)

    async def upload_media(
        self,
        property_id: uuid.UUID,
        file: UploadFile,
        media_type: MediaType = MediaType.IMAGE,
        caption: Optional[str] = None,
        is_featured: bool = False
    ) -> PropertyMedia:
        """
        Store an uploaded image or floor plan with a JPEG thumbnail.

        Args:
            property_id: Listing to attach to
            file: Uploaded file
            media_type: image or floorplan
            caption: Optional caption
            is_featured: Feature the image after upload

        Returns:
            Created media row

        Raises:
            BadRequestError: If a video is uploaded or the file fails validation
        """
        await self._ensure_property(property_id)

        if media_type == MediaType.VIDEO:
            raise BadRequestError("Videos must be added as YouTube or Vimeo links")

        content, _, extension = await FileValidator.validate_upload_file(file, settings.max_file_size)

        folder = self.storage.get_property_folder(property_id)
        object_path = await self.storage.save_bytes(content, folder, extension)
        thumbnail = ImageProcessor.create_thumbnail(content, settings.thumbnail_size)
        thumbnail_path = await self.storage.save_bytes(thumbnail, f"{folder}/thumbnails", ".jpg")

        data = {
            "media_type": media_type,
            "url": self.storage.url_for(object_path),
            "thumbnail_url": self.storage.url_for(thumbnail_path),
            "caption": caption.strip() if caption and caption.strip() else None,
            "tags": [],
            "is_featured": is_featured and media_type == MediaType.IMAGE,
            "file_size": len(content),
        }
        try:
            media = await self._create(property_id, data)
        except Exception:
            logger.warning(f"Removing stored files for failed upload to property {property_id}")
            self.storage.delete_url(data["url"])
            self.storage.delete_url(data["thumbnail_url"])
            raise
        logger.info(f"Uploaded {media_type.value} for property {property_id}: {media.url}")
        return media

    async def _create(self, property_id: uuid.UUID, data: dict) -> PropertyMedia:
        feature = data.pop("is_featured", False)
        data["property_id"] = property_id
        data["is_featured"] = False
        data["sort_order"] = await self.media_repo.count_by_property_id(property_id)

        media = await self.media_repo.create(data)
        if feature:
            media = await self.media_repo.set_featured(media)

        logger.info(f"Media added to property {property_id}: {media.id} ({media.media_type.value})")
        return media

    async def update_media(self, media_id: uuid.UUID, media_data: MediaUpdate) -> PropertyMedia:
        """
        Update caption, tags, room type, featured flag or sort order.

        Raises:
            MediaNotFoundError: If the media doesn't exist
            BusinessRuleViolationError: If a non-image is featured
        """
        media = await self.get_media(media_id)
        update_data = media_data.model_dump(exclude_unset=True)
        feature = update_data.pop("is_featured", None)

        if feature and not media.is_image:
            raise BusinessRuleViolationError("featured_image", "Only images can be featured")

        if feature is False:
            update_data["is_featured"] = False

        if update_data:
            media = await self.media_repo.update(media_id, update_data)

        if feature:
            media = await self.media_repo.set_featured(media)

        logger.info(f"Media updated: {media_id}")
        return media

    async def feature_media(self, media_id: uuid.UUID) -> PropertyMedia:
        """
        Make an image the featured image of its listing.

        Raises:
            MediaNotFoundError: If the media doesn't exist
            BusinessRuleViolationError: If the media is not an image
        """
        media = await self.get_media(media_id)
        try:
            media.validate_feature()
        except ValueError as e:
            raise BusinessRuleViolationError("featured_image", str(e))

        media = await self.media_repo.set_featured(media)
        logger.info(f"Media featured: {media_id} on property {media.property_id}")
        return media

    async def reorder_media(self, property_id: uuid.UUID, media_ids: List[uuid.UUID]) -> List[PropertyMedia]:
        """
        Rewrite gallery order so each item's sort_order is its list position.

        Raises:
            PropertyNotFoundError: If the listing doesn't exist
            BadRequestError: If the ids are not exactly the listing's media
        """
        current = await self.list_media(property_id)
        validate_full_order([m.id for m in current], media_ids, "media")

        await self.media_repo.apply_order(media_ids)
        logger.info(f"Media reordered for property {property_id}")
        return await self.media_repo.get_by_property_id(property_id)

    async def delete_media(self, media_id: uuid.UUID) -> None:
        """
        Delete a media item and renumber the rest of the gallery.

        Raises:
            MediaNotFoundError: If the media doesn't exist
        """
        media = await self.get_media(media_id)
        property_id = media.property_id
        urls = [media.url, media.thumbnail_url]

        await self.media_repo.delete(media_id)
        await self.media_repo.reindex(property_id)

        for url in urls:
            self.storage.delete_url(url)
        logger.info(f"Media deleted: {media_id} from property {property_id}")
