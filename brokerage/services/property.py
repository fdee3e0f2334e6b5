"""
Property service for managing listings with business logic validation.
Handles CRUD operations, catalog search and cleanup of stored media files.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from brokerage.repositories.property import PropertyRepository
from brokerage.repositories.media import MediaRepository
from brokerage.models.property import Property
from brokerage.schemas.property import (
    PropertyCreate,
    PropertyUpdate,
    PropertyResponse,
    PropertyListResponse,
    PropertySearchFilters,
)
from brokerage.utils.exceptions import APIException, PropertyNotFoundError, ValidationError
from brokerage.utils.file_utils import FileStorage
import math
import uuid
import logging

logger = logging.getLogger(__name__)


class PropertyService:
    """
    Listing service used by both the public catalog and the back office.
    """

    def __init__(self, db_session: AsyncSession, storage: FileStorage = None):
        self.db = db_session
        self.property_repo = PropertyRepository(db_session)
        self.media_repo = MediaRepository(db_session)
        self.storage = storage or FileStorage()

    async def get_property(self, property_id: uuid.UUID) -> Property:
        """
        Get a listing by ID.

        Raises:
            PropertyNotFoundError: If the listing doesn't exist
        """
        property_obj = await self.property_repo.get_by_id(property_id)
        if not property_obj:
            raise PropertyNotFoundError(str(property_id))
        return property_obj

    async def search_properties(self, filters: PropertySearchFilters) -> PropertyListResponse:
        """
        Run a catalog search and wrap the page in the list envelope.

        Args:
            filters: Catalog filters including pagination and sorting

        Returns:
            Paginated listing response
        """
        skip = (filters.page - 1) * filters.page_size
        properties, total = await self.property_repo.search_properties(
            filters, skip=skip, limit=filters.page_size
        )

        total_pages = math.ceil(total / filters.page_size) if total > 0 else 0

        return PropertyListResponse(
            properties=[PropertyResponse.model_validate(p) for p in properties],
            total=total,
            page=filters.page,
            page_size=filters.page_size,
            total_pages=total_pages,
            has_next=filters.page < total_pages,
            has_previous=filters.page > 1,
        )

    async def create_property(self, property_data: PropertyCreate) -> Property:
        """
        Create a new listing.

        Args:
            property_data: Listing creation data

        Returns:
            Created property instance

        Raises:
            ValidationError: If the listing fails model validation
        """
        try:
            property_obj = await self.property_repo.create_property(property_data.model_dump())
            logger.info(f"Property created: {property_obj.title} (ID: {property_obj.id})")
            return property_obj
        except ValueError as e:
            raise ValidationError(str(e))

    async def update_property(self, property_id: uuid.UUID, property_data: PropertyUpdate) -> Property:
        """
        Apply a partial update; only fields present in the request change.

        Raises:
            PropertyNotFoundError: If the listing doesn't exist
            ValidationError: If the updated listing is invalid
        """
        property_obj = await self.get_property(property_id)
        update_data = property_data.model_dump(exclude_unset=True)

        # Validate the merged listing before writing
        merged = {
            column: getattr(property_obj, column)
            for column in ("price", "area", "bedrooms", "bathrooms")
        }
        merged.update({k: v for k, v in update_data.items() if k in merged})
        try:
            Property(**merged).validate_all()
        except ValueError as e:
            raise ValidationError(str(e))

        updated = await self.property_repo.update(property_id, update_data)
        if updated is None:
            raise PropertyNotFoundError(str(property_id))

        logger.info(f"Property updated: {property_id} fields={sorted(update_data)}")
        return updated

    async def delete_property(self, property_id: uuid.UUID) -> None:
        """
        Delete a listing, its media rows and any locally stored files.

        Raises:
            PropertyNotFoundError: If the listing doesn't exist
        """
        try:
            property_obj = await self.get_property(property_id)
            media = await self.media_repo.get_by_property_id(property_id)
            urls: List[str] = [property_obj.image]
            for item in media:
                urls.extend([item.url, item.thumbnail_url])

            deleted = await self.property_repo.delete_property(property_id)
            if not deleted:
                raise PropertyNotFoundError(str(property_id))

            removed = sum(1 for url in urls if self.storage.delete_url(url))
            logger.info(f"Property deleted: {property_id} ({len(media)} media, {removed} files removed)")
        except APIException:
            raise
        except Exception as e:
            logger.error(f"Failed to delete property {property_id}: {e}")
            raise
