"""
Repository for contact-form inquiries.
"""

import logging
from typing import List, Optional, Dict
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from brokerage.models.inquiry import Inquiry, InquiryStatus
from brokerage.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class InquiryRepository(BaseRepository[Inquiry]):
    """Repository for Inquiry database operations."""

    def __init__(self, db_session: AsyncSession):
        super().__init__(Inquiry, db_session)

    async def list_inquiries(
        self,
        status: Optional[InquiryStatus] = None,
        skip: int = 0,
        limit: Optional[int] = None
    ) -> List[Inquiry]:
        """
        List inquiries newest first, optionally by status.

        Args:
            status: Only return inquiries in this state
            skip: Number of records to skip
            limit: Maximum number of records to return; None returns every match

        Returns:
            List of inquiries
        """
        query = select(Inquiry)
        if status is not None:
            query = query.where(Inquiry.status == status)
        query = query.order_by(Inquiry.created_at.desc(), Inquiry.id).offset(skip)
        if limit is not None:
            query = query.limit(limit)

        result = await self.db.execute(query)
        inquiries = list(result.scalars().all())
        logger.debug(f"Listed {len(inquiries)} inquiries (status={status})")
        return inquiries

    async def count_by_status(self) -> Dict[InquiryStatus, int]:
        """
        Count inquiries per status.

        Returns:
            Mapping of every status to its count
        """
        query = select(Inquiry.status, func.count(Inquiry.id)).group_by(Inquiry.status)
        result = await self.db.execute(query)
        counts = {status: 0 for status in InquiryStatus}
        for status, count in result.all():
            counts[status] = count
        return counts

    async def get_recent(self, limit: int = 5) -> List[Inquiry]:
        return await self.list_inquiries(limit=limit)
