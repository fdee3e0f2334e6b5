"""
Inquiry service for the contact form and the admin inbox.
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from brokerage.models.inquiry import Inquiry, InquiryStatus
from brokerage.repositories.inquiry import InquiryRepository
from brokerage.repositories.property import PropertyRepository
from brokerage.schemas.inquiry import InquiryCreate, InquiryUpdate
from brokerage.utils.exceptions import (
    InquiryNotFoundError,
    InvalidStatusTransitionError,
    PropertyNotFoundError,
)

logger = logging.getLogger(__name__)


class InquiryService:
    """Lead capture and follow-up tracking."""

    def __init__(self, db_session: AsyncSession):
        self.db = db_session
        self.inquiry_repo = InquiryRepository(db_session)
        self.property_repo = PropertyRepository(db_session)

    async def submit_inquiry(self, inquiry_data: InquiryCreate) -> Inquiry:
        """
        Store a contact form submission as a new lead.

        Args:
            inquiry_data: Validated form data

        Returns:
            Created inquiry with status "new"

        Raises:
            PropertyNotFoundError: If the referenced listing doesn't exist
        """
        if inquiry_data.property_id and not await self.property_repo.exists(inquiry_data.property_id):
            raise PropertyNotFoundError(str(inquiry_data.property_id))

        data = inquiry_data.model_dump()
        data["status"] = InquiryStatus.NEW
        inquiry = await self.inquiry_repo.create(data)

        logger.info(
            f"Inquiry received from {inquiry.email} (ID: {inquiry.id}, service={inquiry.service}, "
            f"property={inquiry.property_id})"
        )
        return inquiry

    async def list_inquiries(self, status: Optional[InquiryStatus] = None) -> List[Inquiry]:
        return await self.inquiry_repo.list_inquiries(status=status)

    async def get_inquiry(self, inquiry_id: uuid.UUID) -> Inquiry:
        inquiry = await self.inquiry_repo.get_by_id(inquiry_id)
        if not inquiry:
            raise InquiryNotFoundError(str(inquiry_id))
        return inquiry

    async def update_inquiry(self, inquiry_id: uuid.UUID, inquiry_data: InquiryUpdate) -> Inquiry:
        """
        Change status and/or notes.

        Raises:
            InquiryNotFoundError: If the inquiry doesn't exist
            InvalidStatusTransitionError: If the status move is not allowed
        """
        inquiry = await self.get_inquiry(inquiry_id)
        update_data = inquiry_data.model_dump(exclude_unset=True)

        new_status = update_data.get("status")
        if new_status is not None and not inquiry.can_transition_to(new_status):
            logger.warning(
                f"Rejected inquiry status change {inquiry.status.value} -> {new_status.value} for {inquiry_id}"
            )
            raise InvalidStatusTransitionError(inquiry.status.value, new_status.value)

        previous = inquiry.status
        updated = await self.inquiry_repo.update(inquiry_id, update_data)

        if new_status is not None and new_status != previous:
            logger.info(f"Inquiry {inquiry_id} moved {previous.value} -> {new_status.value}")
        else:
            logger.info(f"Inquiry {inquiry_id} updated")
        return updated

    async def delete_inquiry(self, inquiry_id: uuid.UUID) -> None:
        if not await self.inquiry_repo.delete(inquiry_id):
            raise InquiryNotFoundError(str(inquiry_id))
        logger.info(f"Inquiry deleted: {inquiry_id}")
