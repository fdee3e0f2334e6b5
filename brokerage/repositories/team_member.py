"""
Repository for team member profiles and their display order.
"""

import uuid
import logging
from typing import List, Optional, Sequence
from sqlalchemy import select, update, func
from sqlalchemy.ext.asyncio import AsyncSession

from brokerage.models.team_member import TeamMember
from brokerage.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class TeamMemberRepository(BaseRepository[TeamMember]):
    """Repository for TeamMember database operations."""

    def __init__(self, db_session: AsyncSession):
        super().__init__(TeamMember, db_session)

    async def list_members(self, active_only: bool = False) -> List[TeamMember]:
        """
        List team members in display order.

        Args:
            active_only: Only return members visible on the public site

        Returns:
            Members ordered by sort_order, then name
        """
        query = select(TeamMember)
        if active_only:
            query = query.where(TeamMember.is_active.is_(True))
        query = query.order_by(TeamMember.sort_order.asc(), TeamMember.name.asc())

        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def next_sort_order(self) -> int:
        """Position after the current last member."""
        result = await self.db.execute(select(func.max(TeamMember.sort_order)))
        current_max: Optional[int] = result.scalar()
        return 0 if current_max is None else current_max + 1

    async def apply_order(self, ordered_ids: Sequence[uuid.UUID]) -> None:
        """
        Write sort_order = position for each id and commit.
        """
        try:
            for position, member_id in enumerate(ordered_ids):
                await self.db.execute(
                    update(TeamMember)
                    .where(TeamMember.id == member_id)
                    .values(sort_order=position)
                )
            await self.db.commit()
            logger.debug(f"Reordered {len(ordered_ids)} team members")
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to reorder team: {e}")
            raise
