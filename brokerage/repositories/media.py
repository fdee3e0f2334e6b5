"""
Repository for PropertyMedia model operations.
Handles gallery queries, the featured-image flag and display ordering.
"""

import uuid
import logging
from typing import List, Sequence
from sqlalchemy import select, update, func
from sqlalchemy.ext.asyncio import AsyncSession

from brokerage.models.media import PropertyMedia
from brokerage.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class MediaRepository(BaseRepository[PropertyMedia]):
    """Repository for PropertyMedia database operations."""

    def __init__(self, db_session: AsyncSession):
        super().__init__(PropertyMedia, db_session)

    async def get_by_property_id(self, property_id: uuid.UUID) -> List[PropertyMedia]:
        """
        Get all media for a listing in gallery order.

        Args:
            property_id: ID of the property

        Returns:
            Media ordered by sort_order, then upload time
        """
        query = (
            select(PropertyMedia)
            .where(PropertyMedia.property_id == property_id)
            .order_by(PropertyMedia.sort_order.asc(), PropertyMedia.created_at.asc())
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def count_by_property_id(self, property_id: uuid.UUID) -> int:
        """
        Count media for a listing.

        Args:
            property_id: ID of the property

        Returns:
            Number of media rows for the property
        """
        query = select(func.count(PropertyMedia.id)).where(
            PropertyMedia.property_id == property_id
        )
        result = await self.db.execute(query)
        return result.scalar() or 0

    async def clear_featured(self, property_id: uuid.UUID) -> None:
        """
        Remove the featured flag from every media row of a listing.
        Does not commit; callers set the new featured row in the same transaction.
        """
        await self.db.execute(
            update(PropertyMedia)
            .where(PropertyMedia.property_id == property_id)
            .values(is_featured=False)
        )

    async def set_featured(self, media: PropertyMedia) -> PropertyMedia:
        """
        Make one image the featured image of its listing.

        Args:
            media: Image to feature

        Returns:
            The refreshed media row
        """
        try:
            await self.clear_featured(media.property_id)
            await self.db.execute(
                update(PropertyMedia)
                .where(PropertyMedia.id == media.id)
                .values(is_featured=True)
            )
            await self.db.commit()
            await self.db.refresh(media)
            logger.debug(f"Featured media {media.id} for property {media.property_id}")
            return media
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to feature media {media.id}: {e}")
            raise

    async def apply_order(self, ordered_ids: Sequence[uuid.UUID]) -> None:
        """
        Write sort_order = position for each id and commit.

        Args:
            ordered_ids: Media ids in their new display order
        """
        try:
            for position, media_id in enumerate(ordered_ids):
                await self.db.execute(
                    update(PropertyMedia)
                    .where(PropertyMedia.id == media_id)
                    .values(sort_order=position)
                )
            await self.db.commit()
            logger.debug(f"Reordered {len(ordered_ids)} media rows")
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to reorder media: {e}")
            raise

    async def reindex(self, property_id: uuid.UUID) -> None:
        """Close gaps so the listing's media are numbered 0..n-1."""
        remaining = await self.get_by_property_id(property_id)
        await self.apply_order([media.id for media in remaining])
