"""
Unit tests for model helpers: validation, password hashing and derived fields.
"""

import pytest

from brokerage.models.admin_user import AdminUser
from brokerage.models.inquiry import Inquiry, InquiryStatus, STATUS_TRANSITIONS
from brokerage.models.media import MediaType, PropertyMedia
from brokerage.models.property import Property
from brokerage.models.team_member import TeamMember
from tests.conftest import PropertyFactory


class TestPropertyValidation:
    """Listing validation rules."""

    def test_valid_property_passes(self):
        Property(**PropertyFactory.create_property_data()).validate_all()

    @pytest.mark.parametrize("price", [0, -5, 100_000_000_000])
    def test_invalid_price_rejected(self, price):
        listing = Property(**PropertyFactory.create_property_data(price=price))
        with pytest.raises(ValueError):
            listing.validate_price()

    def test_negative_bedrooms_rejected(self):
        listing = Property(**PropertyFactory.create_property_data(bedrooms=-1))
        with pytest.raises(ValueError, match="bedrooms"):
            listing.validate_rooms()

    def test_missing_room_counts_allowed(self):
        # Plots and commercial units have no rooms
        listing = Property(**PropertyFactory.create_property_data(bedrooms=None, bathrooms=None))
        listing.validate_rooms()

    def test_zero_area_rejected(self):
        listing = Property(**PropertyFactory.create_property_data(area=0))
        with pytest.raises(ValueError, match="area"):
            listing.validate_all()


class TestAdminUser:
    def test_password_hash_and_verify(self):
        admin = AdminUser(
            email="admin@example.com",
            name="Admin",
            hashed_password=AdminUser.hash_password("supersecret"),
        )
        assert admin.hashed_password != "supersecret"
        assert admin.verify_password("supersecret")
        assert not admin.verify_password("wrong-password")

    def test_short_password_rejected(self):
        with pytest.raises(ValueError, match="at least 8"):
            AdminUser.hash_password("short")

    def test_email_is_normalized(self):
        assert AdminUser.validate_email_format("Admin@Example.COM") == "admin@example.com"

    def test_invalid_email_rejected(self):
        with pytest.raises(ValueError, match="Invalid email"):
            AdminUser.validate_email_format("not-an-email")


class TestInquiryTransitions:
    """Follow-up workflow for leads."""

    @pytest.mark.parametrize("target", [InquiryStatus.IN_PROGRESS, InquiryStatus.RESPONDED, InquiryStatus.CLOSED])
    def test_new_can_move_anywhere(self, target):
        inquiry = Inquiry(status=InquiryStatus.NEW)
        assert inquiry.can_transition_to(target)

    def test_nothing_returns_to_new(self):
        for status, targets in STATUS_TRANSITIONS.items():
            if status != InquiryStatus.NEW:
                assert InquiryStatus.NEW not in targets

    def test_closed_can_only_reopen(self):
        inquiry = Inquiry(status=InquiryStatus.CLOSED)
        assert inquiry.can_transition_to(InquiryStatus.IN_PROGRESS)
        assert not inquiry.can_transition_to(InquiryStatus.RESPONDED)
        assert not inquiry.can_transition_to(InquiryStatus.NEW)

    def test_same_status_is_allowed(self):
        inquiry = Inquiry(status=InquiryStatus.RESPONDED)
        assert inquiry.can_transition_to(InquiryStatus.RESPONDED)


class TestPropertyMedia:
    def test_youtube_embed_url(self):
        media = PropertyMedia(media_type=MediaType.VIDEO, platform="youtube", video_id="dQw4w9WgXcQ")
        assert media.embed_url == "https://www.youtube.com/embed/dQw4w9WgXcQ"

    def test_vimeo_embed_url(self):
        media = PropertyMedia(media_type=MediaType.VIDEO, platform="vimeo", video_id="76979871")
        assert media.embed_url == "https://player.vimeo.com/video/76979871"

    def test_images_have_no_embed_url(self):
        media = PropertyMedia(media_type=MediaType.IMAGE, url="https://example.com/a.jpg")
        assert media.embed_url is None

    def test_only_images_can_be_featured(self):
        PropertyMedia(media_type=MediaType.IMAGE).validate_feature()
        with pytest.raises(ValueError, match="Only images"):
            PropertyMedia(media_type=MediaType.FLOORPLAN).validate_feature()


class TestTeamMember:
    @pytest.mark.parametrize("name,expected", [
        ("Shahzad Ahmad", "SA"),
        ("madonna", "M"),
        ("Muhammad Ali Khan", "MA"),
    ])
    def test_initials(self, name, expected):
        assert TeamMember(name=name).initials == expected

    def test_negative_stats_rejected(self):
        member = TeamMember(name="Test Agent", properties_sold=-3)
        with pytest.raises(ValueError, match="properties_sold"):
            member.validate_stats()
