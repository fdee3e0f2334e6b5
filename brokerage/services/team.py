"""
Team service for staff profiles and their order on the team page.
"""

import logging
import uuid
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from brokerage.constants import DEFAULT_TEAM
from brokerage.models.team_member import TeamMember
from brokerage.repositories.team_member import TeamMemberRepository
from brokerage.schemas.team import TeamMemberCreate, TeamMemberUpdate
from brokerage.utils.exceptions import TeamMemberNotFoundError
from brokerage.utils.ordering import validate_full_order

logger = logging.getLogger(__name__)


class TeamService:
    """Manage team members shown on the public site."""

    def __init__(self, db_session: AsyncSession):
        self.db = db_session
        self.team_repo = TeamMemberRepository(db_session)

    async def list_public(self) -> List[TeamMember]:
        """Active members in display order."""
        return await self.team_repo.list_members(active_only=True)

    async def list_all(self) -> List[TeamMember]:
        return await self.team_repo.list_members()

    async def get_member(self, member_id: uuid.UUID) -> TeamMember:
        member = await self.team_repo.get_by_id(member_id)
        if not member:
            raise TeamMemberNotFoundError(str(member_id))
        return member

    async def create_member(self, member_data: TeamMemberCreate) -> TeamMember:
        """
        Add a member; without an explicit sort_order they go to the end of the list.

        Args:
            member_data: Profile fields

        Returns:
            Created member
        """
        data = member_data.model_dump()
        data["email"] = str(data["email"]).lower()
        if data.get("sort_order") is None:
            data["sort_order"] = await self.team_repo.next_sort_order()

        member = await self.team_repo.create(data)
        logger.info(f"Team member created: {member.name} (ID: {member.id}, order={member.sort_order})")
        return member

    async def update_member(self, member_id: uuid.UUID, member_data: TeamMemberUpdate) -> TeamMember:
        await self.get_member(member_id)
        update_data = member_data.model_dump(exclude_unset=True)
        if update_data.get("email"):
            update_data["email"] = str(update_data["email"]).lower()

        member = await self.team_repo.update(member_id, update_data)
        logger.info(f"Team member updated: {member_id} fields={sorted(update_data)}")
        return member

    async def delete_member(self, member_id: uuid.UUID) -> None:
        if not await self.team_repo.delete(member_id):
            raise TeamMemberNotFoundError(str(member_id))
        logger.info(f"Team member deleted: {member_id}")

    async def move_member(self, member_id: uuid.UUID, direction: str) -> List[TeamMember]:
        """
        Swap a member with its neighbour in the display order.
        Moving the first member up or the last member down changes nothing.

        Args:
            member_id: Member to move
            direction: "up" or "down"

        Returns:
            All members in the new order
        """
        members = await self.team_repo.list_members()
        ids = [m.id for m in members]
        if member_id not in ids:
            raise TeamMemberNotFoundError(str(member_id))

        index = ids.index(member_id)
        target = index - 1 if direction == "up" else index + 1
        if target < 0 or target >= len(ids):
            logger.debug(f"Team member {member_id} already at the {direction} end")
            return members

        ids[index], ids[target] = ids[target], ids[index]
        # Renumber the whole list so duplicate sort_order values cannot block the swap
        await self.team_repo.apply_order(ids)
        logger.info(f"Team member {member_id} moved {direction}")
        return await self.team_repo.list_members()

    async def reorder_members(self, member_ids: List[uuid.UUID]) -> List[TeamMember]:
        """
        Rewrite the display order from a full list of member ids.

        Raises:
            BadRequestError: If the ids are not exactly the current members
        """
        members = await self.team_repo.list_members()
        validate_full_order([m.id for m in members], member_ids, "team member")

        await self.team_repo.apply_order(member_ids)
        logger.info(f"Team reordered ({len(member_ids)} members)")
        return await self.team_repo.list_members()

    async def seed_defaults(self) -> int:
        """
        Insert the default roster when the team table is empty.

        Returns:
            Number of members inserted
        """
        if await self.team_repo.count() > 0:
            logger.info("Team already has members; skipping seed")
            return 0

        for position, profile in enumerate(DEFAULT_TEAM):
            await self.team_repo.create({**profile, "sort_order": position})

        logger.info(f"Seeded {len(DEFAULT_TEAM)} team members")
        return len(DEFAULT_TEAM)
