"""
Team member model for the public "Our Team" page and business cards.
"""

from sqlalchemy import String, Text, Integer, Boolean, Index
from sqlalchemy.orm import Mapped, mapped_column
from brokerage.database import Base
from typing import Optional


class TeamMember(Base):
    """
    Agent or staff profile.
    Contact fields can be hidden from the public site individually.
    """

    __tablename__ = "team_members"

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    role: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Job title shown under the name"
    )

    department: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    specialization: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    short_bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Contact details
    email: Mapped[str] = mapped_column(String(255), nullable=False)

    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    whatsapp: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    photo: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
        comment="Profile photo URL"
    )

    # Social links
    linkedin_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    facebook_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    instagram_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    # Public stats
    years_experience: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    properties_sold: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    happy_clients: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # Display
    sort_order: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        index=True,
        comment="Position on the team page"
    )

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        index=True,
        comment="Whether the member is shown on the public site"
    )

    show_email: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    show_phone: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    show_whatsapp: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        return f"<TeamMember(id={self.id}, name={self.name}, sort_order={self.sort_order})>"

    @property
    def initials(self) -> str:
        """Up to two initials, used when no photo is available."""
        parts = [part for part in self.name.split() if part]
        return "".join(part[0].upper() for part in parts[:2]) or "?"

    def validate_stats(self) -> None:
        """
        Validate public stats.

        Raises:
            ValueError: If a stat is negative
        """
        for label in ("years_experience", "properties_sold", "happy_clients"):
            value = getattr(self, label)
            if value is not None and value < 0:
                raise ValueError(f"{label} cannot be negative")


public_order_index = Index(
    'idx_team_members_active_order',
    TeamMember.is_active,
    TeamMember.sort_order
)
