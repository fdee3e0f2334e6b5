"""
Property model for sale and rental listings.
Handles listing data with location, pricing, amenities and the media gallery.
"""

from sqlalchemy import String, Text, Integer, Boolean, JSON, Enum as SQLEnum, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from brokerage.database import Base
import enum
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from brokerage.models.media import PropertyMedia


class PropertyType(str, enum.Enum):
    """Kind of building or land being listed."""
    HOUSE = "House"
    APARTMENT = "Apartment"
    PENTHOUSE = "Penthouse"
    COMMERCIAL = "Commercial"
    TOWNHOUSE = "Townhouse"
    VILLA = "Villa"
    PLOT = "Plot"


class PropertyStatus(str, enum.Enum):
    """Whether a listing is offered for sale or for rent."""
    FOR_SALE = "For Sale"
    FOR_RENT = "For Rent"


class Property(Base):
    """
    Property model for managing listings shown to site visitors.
    Media (images, videos, floor plans) hang off the listing through PropertyMedia.
    """

    __tablename__ = "properties"

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Listing title"
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Detailed listing description"
    )

    price: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        index=True,
        comment="Asking price or monthly rent in whole currency units"
    )

    property_type: Mapped[PropertyType] = mapped_column(
        "type",
        SQLEnum(PropertyType),
        nullable=False,
        index=True,
        comment="Building or land type"
    )

    status: Mapped[PropertyStatus] = mapped_column(
        SQLEnum(PropertyStatus),
        nullable=False,
        index=True,
        comment="For sale or for rent"
    )

    location: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Neighbourhood or address line"
    )

    city: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True
    )

    area: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Covered area in square feet"
    )

    bedrooms: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, index=True)

    bathrooms: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    image: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        comment="Cover image URL used on listing cards"
    )

    featured: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        index=True,
        comment="Whether the listing is promoted on the home page"
    )

    amenities: Mapped[List[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        comment="Free-form amenity labels"
    )

    media: Mapped[List["PropertyMedia"]] = relationship(
        "PropertyMedia",
        back_populates="property_rel",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="raise",
        order_by="PropertyMedia.sort_order"
    )

    def __repr__(self) -> str:
        return f"<Property(id={self.id}, title={self.title[:30]}, price={self.price})>"

    def validate_price(self) -> None:
        """
        Validate listing price.

        Raises:
            ValueError: If price is invalid
        """
        if self.price is None or self.price <= 0:
            raise ValueError("Property price must be greater than 0")

        if self.price > 99_999_999_999:
            raise ValueError("Property price exceeds maximum allowed value")

    def validate_rooms(self) -> None:
        """
        Validate bedroom and bathroom counts.

        Raises:
            ValueError: If a count is out of range
        """
        for label, value in (("bedrooms", self.bedrooms), ("bathrooms", self.bathrooms)):
            if value is None:
                continue
            if value < 0:
                raise ValueError(f"Number of {label} cannot be negative")
            if value > 50:
                raise ValueError(f"Number of {label} exceeds reasonable limit")

    def validate_area(self) -> None:
        """
        Validate covered area.

        Raises:
            ValueError: If area is invalid
        """
        if self.area is None or self.area <= 0:
            raise ValueError("Property area must be greater than 0")

        if self.area > 10_000_000:
            raise ValueError("Property area exceeds reasonable limit")

    def validate_all(self) -> None:
        """
        Run all validation checks on the listing.

        Raises:
            ValueError: If any validation fails
        """
        self.validate_price()
        self.validate_rooms()
        self.validate_area()


# Composite index for the catalog filters (status, type, city with price range)
catalog_filter_index = Index(
    'idx_properties_catalog_filter',
    Property.status,
    Property.property_type,
    Property.city,
    Property.price
)

# Index for the home page featured strip
featured_created_index = Index(
    'idx_properties_featured_created',
    Property.featured,
    Property.created_at.desc()
)
