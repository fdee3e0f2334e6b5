"""
Dashboard metrics for the back office.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from brokerage.models.inquiry import InquiryStatus
from brokerage.models.property import PropertyStatus
from brokerage.repositories.inquiry import InquiryRepository
from brokerage.repositories.property import PropertyRepository
from brokerage.repositories.team_member import TeamMemberRepository
from brokerage.schemas.dashboard import DashboardMetrics
from brokerage.schemas.inquiry import InquiryResponse

logger = logging.getLogger(__name__)

RECENT_INQUIRY_COUNT = 5


class DashboardService:
    def __init__(self, db_session: AsyncSession):
        self.property_repo = PropertyRepository(db_session)
        self.inquiry_repo = InquiryRepository(db_session)
        self.team_repo = TeamMemberRepository(db_session)

    async def get_metrics(self) -> DashboardMetrics:
        """
        Collect listing, inquiry and team counts.

        Returns:
            DashboardMetrics with the five newest inquiries
        """
        property_counts = await self.property_repo.count_by_status()
        inquiry_counts = await self.inquiry_repo.count_by_status()
        recent = await self.inquiry_repo.get_recent(RECENT_INQUIRY_COUNT)

        metrics = DashboardMetrics(
            total_properties=sum(property_counts.values()),
            for_sale=property_counts[PropertyStatus.FOR_SALE],
            for_rent=property_counts[PropertyStatus.FOR_RENT],
            featured_properties=await self.property_repo.count({"featured": True}),
            total_inquiries=sum(inquiry_counts.values()),
            new_inquiries=inquiry_counts[InquiryStatus.NEW],
            in_progress_inquiries=inquiry_counts[InquiryStatus.IN_PROGRESS],
            responded_inquiries=inquiry_counts[InquiryStatus.RESPONDED] + inquiry_counts[InquiryStatus.CLOSED],
            team_members=await self.team_repo.count(),
            recent_inquiries=[InquiryResponse.model_validate(i) for i in recent],
        )
        logger.debug(f"Dashboard metrics: {metrics.total_properties} properties, {metrics.total_inquiries} inquiries")
        return metrics
