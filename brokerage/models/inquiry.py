"""
Inquiry model for leads submitted through the contact form.
"""

from sqlalchemy import String, Text, ForeignKey, Uuid, Index, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column
from brokerage.database import Base
import enum
import uuid
from typing import Optional, Dict, Set


class InquiryStatus(str, enum.Enum):
    """Follow-up state of a lead."""
    NEW = "new"
    IN_PROGRESS = "in_progress"
    RESPONDED = "responded"
    CLOSED = "closed"


# Allowed moves between follow-up states; same-status updates are always accepted
STATUS_TRANSITIONS: Dict[InquiryStatus, Set[InquiryStatus]] = {
    InquiryStatus.NEW: {InquiryStatus.IN_PROGRESS, InquiryStatus.RESPONDED, InquiryStatus.CLOSED},
    InquiryStatus.IN_PROGRESS: {InquiryStatus.RESPONDED, InquiryStatus.CLOSED},
    InquiryStatus.RESPONDED: {InquiryStatus.CLOSED, InquiryStatus.IN_PROGRESS},
    InquiryStatus.CLOSED: {InquiryStatus.IN_PROGRESS},
}


class Inquiry(Base):
    """
    A lead from the public contact form.
    Optionally tied to the listing the visitor asked about.
    """

    __tablename__ = "inquiries"

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Reply-to address, stored lowercased"
    )

    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    service: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
        comment="Service the visitor is interested in, e.g. sales or rentals"
    )

    message: Mapped[str] = mapped_column(Text, nullable=False)

    status: Mapped[InquiryStatus] = mapped_column(
        SQLEnum(InquiryStatus),
        nullable=False,
        default=InquiryStatus.NEW,
        index=True,
        comment="Follow-up state"
    )

    notes: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        comment="Internal notes from the office"
    )

    property_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("properties.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        comment="Listing the inquiry is about"
    )

    def __repr__(self) -> str:
        return f"<Inquiry(id={self.id}, email={self.email}, status={self.status})>"

    def can_transition_to(self, new_status: InquiryStatus) -> bool:
        """
        Check whether the lead may move to a new follow-up state.

        Args:
            new_status: Requested status

        Returns:
            True if the move is allowed
        """
        if new_status == self.status:
            return True
        return new_status in STATUS_TRANSITIONS.get(self.status, set())


# Admin inbox lists leads by status, newest first
status_created_index = Index(
    'idx_inquiries_status_created',
    Inquiry.status,
    Inquiry.created_at.desc()
)
