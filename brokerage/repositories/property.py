"""
Property repository for the listing catalog.
Translates catalog filters into SQL predicates and handles listing removal.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, and_, or_, func, desc, asc
from brokerage.repositories.base import BaseRepository
from brokerage.models.property import Property, PropertyStatus
from brokerage.models.media import PropertyMedia
from brokerage.models.inquiry import Inquiry
from brokerage.schemas.property import PropertySearchFilters
from typing import List, Dict, Any, Tuple
import uuid
import logging

logger = logging.getLogger(__name__)


class PropertyRepository(BaseRepository[Property]):
    """
    Repository for listing management with catalog filtering.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(Property, db)

    async def create_property(self, property_data: Dict[str, Any]) -> Property:
        """
        Create a new listing with validation.

        Args:
            property_data: Dictionary containing listing fields

        Returns:
            Created property instance

        Raises:
            ValueError: If validation fails
        """
        try:
            property_obj = Property(**property_data)
            property_obj.validate_all()

            created_property = await self.create(property_data)
            logger.debug(f"Created property: {created_property.title} (ID: {created_property.id})")
            return created_property
        except ValueError as e:
            logger.error(f"Property validation failed: {e}")
            raise

    async def search_properties(
        self,
        filters: PropertySearchFilters,
        skip: int = 0,
        limit: int = 24
    ) -> Tuple[List[Property], int]:
        """
        Search listings with filtering, ordering and pagination.

        Args:
            filters: Catalog filters
            skip: Number of records to skip for pagination
            limit: Maximum number of records to return

        Returns:
            Tuple of (properties list, total count)
        """
        try:
            query = select(Property)
            count_query = select(func.count(Property.id))

            conditions = self._build_filter_conditions(filters)
            if conditions:
                query = query.where(and_(*conditions))
                count_query = count_query.where(and_(*conditions))

            count_result = await self.db.execute(count_query)
            total_count = count_result.scalar() or 0

            order_field = getattr(Property, filters.sort_by, Property.created_at)
            direction = desc if filters.sort_order == "desc" else asc
            # id as a tiebreaker keeps pages stable
            query = query.order_by(direction(order_field), Property.id)

            query = query.offset(skip).limit(limit)

            result = await self.db.execute(query)
            properties = result.scalars().all()

            logger.debug(f"Property search returned {len(properties)} of {total_count} total results")
            return list(properties), total_count
        except Exception as e:
            logger.error(f"Failed to search properties: {e}")
            raise

    def _build_filter_conditions(self, filters: PropertySearchFilters) -> List:
        """
        Build SQLAlchemy filter conditions from catalog filters.

        Args:
            filters: PropertySearchFilters instance

        Returns:
            List of SQLAlchemy conditions
        """
        conditions = []

        if filters.status:
            conditions.append(Property.status == filters.status)

        if filters.property_type:
            conditions.append(Property.property_type == filters.property_type)

        if filters.city:
            conditions.append(func.lower(Property.city) == filters.city.lower())

        if filters.min_price:
            conditions.append(Property.price >= filters.min_price)
        if filters.max_price:
            conditions.append(Property.price <= filters.max_price)

        # Minimum bedrooms
        if filters.bedrooms:
            conditions.append(Property.bedrooms >= filters.bedrooms)

        if filters.featured:
            conditions.append(Property.featured.is_(True))

        if filters.query:
            search_term = f"%{filters.query}%"
            conditions.append(
                or_(
                    Property.title.ilike(search_term),
                    Property.location.ilike(search_term),
                    Property.city.ilike(search_term)
                )
            )

        return conditions

    async def count_by_status(self) -> Dict[PropertyStatus, int]:
        """
        Count listings per status.

        Returns:
            Mapping of status to count, with zero for missing statuses
        """
        try:
            query = select(Property.status, func.count(Property.id)).group_by(Property.status)
            result = await self.db.execute(query)
            counts = {status: 0 for status in PropertyStatus}
            for status, count in result.all():
                counts[status] = count
            return counts
        except Exception as e:
            logger.error(f"Failed to count properties by status: {e}")
            raise

    async def delete_property(self, property_id: uuid.UUID) -> bool:
        """
        Delete a listing together with its media.
        Inquiries about the listing are kept and unlinked.

        Args:
            property_id: UUID of the property

        Returns:
            True if the listing was deleted, False if not found
        """
        try:
            await self.db.execute(
                update(Inquiry)
                .where(Inquiry.property_id == property_id)
                .values(property_id=None)
            )
            await self.db.execute(
                delete(PropertyMedia).where(PropertyMedia.property_id == property_id)
            )
            result = await self.db.execute(delete(Property).where(Property.id == property_id))
            await self.db.commit()

            deleted = result.rowcount > 0
            logger.debug(f"Deleted property {property_id}: {deleted}")
            return deleted
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to delete property {property_id}: {e}")
            raise
