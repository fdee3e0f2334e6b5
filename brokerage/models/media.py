"""
PropertyMedia model for listing galleries.
Handles images, video embeds and floor plans attached to a property.
"""

from sqlalchemy import String, Integer, Boolean, ForeignKey, Index, JSON, Uuid, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from brokerage.database import Base
import enum
import uuid
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from brokerage.models.property import Property


class MediaType(str, enum.Enum):
    """Kind of gallery asset."""
    IMAGE = "image"
    VIDEO = "video"
    FLOORPLAN = "floorplan"


class PropertyMedia(Base):
    """
    Gallery item belonging to a listing.
    At most one image per property carries the featured flag.
    """

    __tablename__ = "property_media"

    property_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="ID of the property this media belongs to"
    )

    media_type: Mapped[MediaType] = mapped_column(
        SQLEnum(MediaType),
        nullable=False,
        default=MediaType.IMAGE,
        comment="image, video or floorplan"
    )

    url: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        comment="Public URL of the asset or the video page"
    )

    thumbnail_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    caption: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    tags: Mapped[List[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        comment="Free-form labels such as 'exterior' or 'kitchen'"
    )

    room_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    is_featured: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        index=True,
        comment="Whether this is the featured image of the property"
    )

    sort_order: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Position in the gallery"
    )

    # Video embeds
    platform: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    video_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    file_size: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        comment="File size in bytes for uploaded files"
    )

    property_rel: Mapped["Property"] = relationship(
        "Property",
        back_populates="media",
        lazy="raise"
    )

    def __repr__(self) -> str:
        return f"<PropertyMedia(id={self.id}, property_id={self.property_id}, type={self.media_type})>"

    @property
    def is_image(self) -> bool:
        return self.media_type == MediaType.IMAGE

    @property
    def embed_url(self) -> Optional[str]:
        """Player URL for video embeds."""
        if self.media_type != MediaType.VIDEO or not self.video_id:
            return None
        if self.platform == "youtube":
            return f"https://www.youtube.com/embed/{self.video_id}"
        if self.platform == "vimeo":
            return f"https://player.vimeo.com/video/{self.video_id}"
        return None

    def validate_feature(self) -> None:
        """
        Check that this item may be the featured image.

        Raises:
            ValueError: If the item is not an image
        """
        if not self.is_image:
            raise ValueError("Only images can be featured")


# Gallery lookups are always by property in display order
property_media_order_index = Index(
    'idx_property_media_property_order',
    PropertyMedia.property_id,
    PropertyMedia.sort_order.asc()
)
