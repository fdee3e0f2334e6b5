"""
Repository tests against an in-memory SQLite database.
"""

import uuid

import pytest
from sqlalchemy.exc import InvalidRequestError

from brokerage.models.inquiry import InquiryStatus
from brokerage.models.media import MediaType
from brokerage.models.property import PropertyStatus, PropertyType
from brokerage.schemas.property import PropertySearchFilters
from tests.conftest import (
    ADMIN_PASSWORD,
    AdminFactory,
    InquiryFactory,
    MediaFactory,
    PropertyFactory,
    TeamFactory,
)


class TestPropertyRepository:
    """Catalog search and listing removal."""

    @pytest.fixture
    async def catalog(self, property_repository):
        return [
            await PropertyFactory.create_property(
                property_repository, title="F-7 Villa", property_type=PropertyType.VILLA,
                price=85_000_000, city="Islamabad", bedrooms=5, featured=True
            ),
            await PropertyFactory.create_property(
                property_repository, title="Gulberg Apartment", property_type=PropertyType.APARTMENT,
                status=PropertyStatus.FOR_RENT, price=250_000, city="Lahore", location="Gulberg III",
                bedrooms=2
            ),
            await PropertyFactory.create_property(
                property_repository, title="Bahria Plot", property_type=PropertyType.PLOT,
                price=12_000_000, city="Islamabad", location="Bahria Town", bedrooms=None, bathrooms=None
            ),
        ]

    async def test_create_property_rejects_invalid_price(self, property_repository):
        with pytest.raises(ValueError, match="price"):
            await PropertyFactory.create_property(property_repository, price=0)

    async def test_no_filters_returns_everything(self, property_repository, catalog):
        properties, total = await property_repository.search_properties(PropertySearchFilters())
        assert total == 3
        assert len(properties) == 3

    async def test_filter_by_status(self, property_repository, catalog):
        properties, total = await property_repository.search_properties(
            PropertySearchFilters(status=PropertyStatus.FOR_RENT)
        )
        assert total == 1
        assert properties[0].title == "Gulberg Apartment"

    async def test_filter_by_type(self, property_repository, catalog):
        properties, _ = await property_repository.search_properties(
            PropertySearchFilters(property_type=PropertyType.PLOT)
        )
        assert [p.title for p in properties] == ["Bahria Plot"]

    async def test_city_filter_is_case_insensitive(self, property_repository, catalog):
        _, total = await property_repository.search_properties(PropertySearchFilters(city="islamabad"))
        assert total == 2

    async def test_price_range(self, property_repository, catalog):
        properties, _ = await property_repository.search_properties(
            PropertySearchFilters(min_price=1_000_000, max_price=50_000_000)
        )
        assert [p.title for p in properties] == ["Bahria Plot"]

    async def test_bedrooms_is_a_minimum(self, property_repository, catalog):
        properties, _ = await property_repository.search_properties(PropertySearchFilters(bedrooms=3))
        assert [p.title for p in properties] == ["F-7 Villa"]

    async def test_zero_values_mean_no_filter(self, property_repository, catalog):
        _, total = await property_repository.search_properties(
            PropertySearchFilters(min_price=0, max_price=0, bedrooms=0, featured=False)
        )
        assert total == 3

    async def test_featured_only(self, property_repository, catalog):
        properties, _ = await property_repository.search_properties(PropertySearchFilters(featured=True))
        assert [p.title for p in properties] == ["F-7 Villa"]

    async def test_text_search_matches_location(self, property_repository, catalog):
        properties, _ = await property_repository.search_properties(PropertySearchFilters(query="gulberg"))
        assert [p.title for p in properties] == ["Gulberg Apartment"]

    async def test_sort_by_price_and_paginate(self, property_repository, catalog):
        filters = PropertySearchFilters(sort_by="price", sort_order="asc", page_size=2)
        first_page, total = await property_repository.search_properties(filters, skip=0, limit=2)
        second_page, _ = await property_repository.search_properties(filters, skip=2, limit=2)

        assert total == 3
        assert [p.price for p in first_page] == [250_000, 12_000_000]
        assert [p.price for p in second_page] == [85_000_000]

    async def test_count_by_status(self, property_repository, catalog):
        counts = await property_repository.count_by_status()
        assert counts[PropertyStatus.FOR_SALE] == 2
        assert counts[PropertyStatus.FOR_RENT] == 1

    async def test_gallery_is_never_lazy_loaded(self, property_repository, test_property, db_session):
        db_session.expunge_all()
        listing = await property_repository.get_by_id(test_property.id)
        with pytest.raises(InvalidRequestError):
            listing.media

    async def test_delete_removes_media_and_unlinks_inquiries(
        self, property_repository, media_repository, inquiry_repository, test_property
    ):
        await MediaFactory.create_media(media_repository, test_property.id)
        inquiry = await InquiryFactory.create_inquiry(inquiry_repository, property_id=test_property.id)

        assert await property_repository.delete_property(test_property.id)

        assert await property_repository.get_by_id(test_property.id) is None
        assert await media_repository.count_by_property_id(test_property.id) == 0
        remaining = await inquiry_repository.get_by_id(inquiry.id)
        await inquiry_repository.db.refresh(remaining)
        assert remaining.property_id is None

    async def test_delete_missing_property_returns_false(self, property_repository):
        assert not await property_repository.delete_property(uuid.uuid4())


class TestMediaRepository:
    """Featured image flag and gallery ordering."""

    async def test_gallery_in_sort_order(self, media_repository, test_property):
        second = await MediaFactory.create_media(media_repository, test_property.id, sort_order=1)
        first = await MediaFactory.create_media(media_repository, test_property.id, sort_order=0)

        gallery = await media_repository.get_by_property_id(test_property.id)
        assert [m.id for m in gallery] == [first.id, second.id]

    async def test_set_featured_keeps_a_single_featured_image(self, media_repository, test_property, db_session):
        first = await MediaFactory.create_media(media_repository, test_property.id, sort_order=0)
        second = await MediaFactory.create_media(media_repository, test_property.id, sort_order=1)

        await media_repository.set_featured(first)
        await media_repository.set_featured(second)

        for media in (first, second):
            await db_session.refresh(media)
        assert not first.is_featured
        assert second.is_featured

    async def test_featuring_does_not_touch_other_listings(
        self, media_repository, property_repository, test_property, db_session
    ):
        other_property = await PropertyFactory.create_property(property_repository, title="Other Listing")
        other = await MediaFactory.create_media(media_repository, other_property.id)
        await media_repository.set_featured(other)

        mine = await MediaFactory.create_media(media_repository, test_property.id)
        await media_repository.set_featured(mine)

        await db_session.refresh(other)
        assert other.is_featured

    async def test_reindex_closes_gaps(self, media_repository, test_property, db_session):
        items = [
            await MediaFactory.create_media(media_repository, test_property.id, sort_order=position)
            for position in (0, 3, 7)
        ]

        await media_repository.reindex(test_property.id)

        for media in items:
            await db_session.refresh(media)
        assert [m.sort_order for m in items] == [0, 1, 2]

    async def test_count_by_property(self, media_repository, test_property):
        await MediaFactory.create_media(media_repository, test_property.id, media_type=MediaType.FLOORPLAN)
        await MediaFactory.create_media(media_repository, test_property.id)
        assert await media_repository.count_by_property_id(test_property.id) == 2


class TestTeamMemberRepository:
    async def test_list_members_in_display_order(self, team_repository):
        await TeamFactory.create_member(team_repository, name="Zara Malik", sort_order=0)
        await TeamFactory.create_member(team_repository, name="Ali Raza", sort_order=1)
        await TeamFactory.create_member(team_repository, name="Bilal Shah", sort_order=1)

        members = await team_repository.list_members()
        assert [m.name for m in members] == ["Zara Malik", "Ali Raza", "Bilal Shah"]

    async def test_active_only_hides_inactive(self, team_repository):
        await TeamFactory.create_member(team_repository, name="Active Agent")
        await TeamFactory.create_member(team_repository, name="Former Agent", is_active=False)

        members = await team_repository.list_members(active_only=True)
        assert [m.name for m in members] == ["Active Agent"]

    async def test_next_sort_order(self, team_repository):
        assert await team_repository.next_sort_order() == 0
        await TeamFactory.create_member(team_repository, sort_order=4)
        assert await team_repository.next_sort_order() == 5

    async def test_apply_order(self, team_repository):
        first = await TeamFactory.create_member(team_repository, name="First Agent", sort_order=0)
        second = await TeamFactory.create_member(team_repository, name="Second Agent", sort_order=1)

        await team_repository.apply_order([second.id, first.id])

        members = await team_repository.list_members()
        assert [m.id for m in members] == [second.id, first.id]


class TestInquiryRepository:
    async def test_list_by_status(self, inquiry_repository):
        await InquiryFactory.create_inquiry(inquiry_repository)
        await InquiryFactory.create_inquiry(inquiry_repository, status=InquiryStatus.CLOSED)

        new = await inquiry_repository.list_inquiries(status=InquiryStatus.NEW)
        assert len(new) == 1
        assert new[0].status == InquiryStatus.NEW

    async def test_count_by_status_includes_every_status(self, inquiry_repository):
        await InquiryFactory.create_inquiry(inquiry_repository)
        await InquiryFactory.create_inquiry(inquiry_repository)

        counts = await inquiry_repository.count_by_status()
        assert counts[InquiryStatus.NEW] == 2
        assert counts[InquiryStatus.RESPONDED] == 0
        assert set(counts) == set(InquiryStatus)

    async def test_get_recent_limits_results(self, inquiry_repository):
        for _ in range(7):
            await InquiryFactory.create_inquiry(inquiry_repository)
        assert len(await inquiry_repository.get_recent(5)) == 5


class TestAdminUserRepository:
    async def test_create_admin_hashes_password(self, admin_repository):
        admin = await AdminFactory.create_admin(admin_repository, email="Owner@Example.com")
        assert admin.email == "owner@example.com"
        assert admin.hashed_password != ADMIN_PASSWORD

    async def test_duplicate_email_rejected(self, admin_repository):
        await AdminFactory.create_admin(admin_repository, email="dup@example.com")
        with pytest.raises(ValueError, match="already exists"):
            await AdminFactory.create_admin(admin_repository, email="dup@example.com")

    async def test_authenticate(self, admin_repository):
        await AdminFactory.create_admin(admin_repository, email="login@example.com")

        assert await admin_repository.authenticate("login@example.com", ADMIN_PASSWORD) is not None
        assert await admin_repository.authenticate("login@example.com", "wrong-password") is None
        assert await admin_repository.authenticate("nobody@example.com", ADMIN_PASSWORD) is None
