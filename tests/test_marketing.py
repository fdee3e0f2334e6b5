"""
Marketing collateral tests: canvas helpers, encoders, layouts and the generator service.
"""

import io
import uuid
import zipfile

import pytest
from PIL import Image
from pydantic import ValidationError as PydanticValidationError

from brokerage.config import get_settings
from brokerage.marketing import (
    Branding,
    Canvas,
    Contact,
    DESIGN_SIZES,
    export_image,
    format_price,
    render_social,
    wrap_text,
)
from brokerage.schemas.marketing import ExportFormat, MaterialType, SocialPostRequest, SocialTemplate
from brokerage.services.marketing import MarketingService
from brokerage.utils.exceptions import BadRequestError, PropertyNotFoundError, TeamMemberNotFoundError
from tests.conftest import PropertyFactory, TeamFactory


@pytest.fixture
def branding():
    return Branding.from_settings(get_settings())


class TestWrapText:
    """Greedy word wrap with a character-count measure."""

    def test_wraps_on_word_boundaries(self):
        assert wrap_text("aaa bbb ccc", 7, len) == ["aaa bbb", "ccc"]

    def test_keeps_explicit_newlines(self):
        assert wrap_text("one\n\ntwo", 100, len) == ["one", "", "two"]

    def test_breaks_words_wider_than_the_column(self):
        assert wrap_text("abcdefghij", 4, len) == ["abcd", "efgh", "ij"]

    def test_empty_text(self):
        assert wrap_text("", 10, len) == [""]


class TestFormatPrice:
    @pytest.mark.parametrize("price,expected", [
        (85_000_000, "PKR 8.5 Crore"),
        (10_000_000, "PKR 1.0 Crore"),
        (250_000, "PKR 2.5 Lac"),
        (45_000, "PKR 45,000"),
    ])
    def test_format_price(self, price, expected):
        assert format_price(price) == expected


class TestCanvas:
    def test_pixel_size_follows_scale(self):
        assert Canvas(525, 300, scale=1).pixel_size == (525, 300)
        assert Canvas(525, 300, scale=4).pixel_size == (2100, 1200)

    def test_translucent_rect_blends(self):
        canvas = Canvas(10, 10, background="#ffffff")
        canvas.rect((0, 0, 10, 10), "#000000", opacity=0.5)
        red, green, blue, _ = canvas.image.getpixel((5, 5))
        assert 120 <= red <= 135
        assert red == green == blue

    def test_vertical_gradient_runs_top_to_bottom(self):
        canvas = Canvas(20, 100)
        canvas.gradient((0, 0, 20, 100), "#000000", "#ffffff")
        top = canvas.image.getpixel((10, 0))[0]
        bottom = canvas.image.getpixel((10, 99))[0]
        assert top < 20
        assert bottom > 235

    def test_paragraph_truncates_to_max_lines(self):
        canvas = Canvas(200, 200)
        text = "word " * 200
        bottom = canvas.paragraph(10, 10, 100, text, 12, "#000000", line_height=1.5, max_lines=2)
        assert bottom == pytest.approx(10 + 2 * 12 * 1.5)

    def test_text_width_is_in_design_units(self):
        small = Canvas(100, 100, scale=1).text_width("Brochure", 12)
        large = Canvas(100, 100, scale=3).text_width("Brochure", 12)
        assert small > 0
        assert large == pytest.approx(small, rel=0.25)


class TestExport:
    @pytest.fixture
    def image(self):
        return Image.new("RGBA", (60, 40), (30, 64, 175, 255))

    def test_png(self, image):
        exported = export_image(image, ExportFormat.PNG, "social", "qanzak", 1)
        assert exported.filename == "qanzak-social-design.png"
        assert exported.media_type == "image/png"
        assert Image.open(io.BytesIO(exported.content)).size == (60, 40)

    def test_jpeg_is_flattened(self, image):
        exported = export_image(image, ExportFormat.JPG, "card", "qanzak", 1)
        decoded = Image.open(io.BytesIO(exported.content))
        assert exported.filename == "qanzak-card-design.jpg"
        assert decoded.format == "JPEG"
        assert decoded.mode == "RGB"

    def test_pdf(self, image):
        exported = export_image(image, ExportFormat.PDF, "flyer", "qanzak", 2)
        assert exported.filename == "qanzak-flyer-design.pdf"
        assert exported.media_type == "application/pdf"
        assert exported.content.startswith(b"%PDF")

    def test_zip_holds_all_three_formats(self, image):
        exported = export_image(image, ExportFormat.ZIP, "brochure", "qanzak", 1)
        assert exported.filename == "qanzak-brochure-package.zip"
        with zipfile.ZipFile(io.BytesIO(exported.content)) as archive:
            assert sorted(archive.namelist()) == [
                "qanzak-brochure-design.jpg",
                "qanzak-brochure-design.pdf",
                "qanzak-brochure-design.png",
            ]


class TestLayouts:
    @pytest.mark.parametrize("template", list(SocialTemplate))
    def test_every_social_template_draws(self, template, branding):
        width, height = DESIGN_SIZES[MaterialType.SOCIAL]
        canvas = Canvas(width, height)
        blank = canvas.image.copy()

        render_social(canvas, SocialPostRequest(template=template), branding, Contact.company(branding))

        assert canvas.image.tobytes() != blank.tobytes()

    def test_company_contact(self, branding):
        contact = Contact.company(branding)
        assert contact.name == branding.name
        assert contact.role == "Sales Team"


class TestMarketingService:
    """Rendering through the service with database lookups."""

    @pytest.mark.parametrize("material", [MaterialType.SOCIAL, MaterialType.FLYER])
    async def test_renders_at_design_size(self, db_session, material):
        exported = await MarketingService(db_session).generate(material, {}, ExportFormat.PNG, scale=1)
        image = Image.open(io.BytesIO(exported.content))
        assert image.size == DESIGN_SIZES[material]

    async def test_default_scale(self, db_session):
        exported = await MarketingService(db_session).generate(MaterialType.SOCIAL, None)
        image = Image.open(io.BytesIO(exported.content))
        assert image.size == (2160, 2160)

    async def test_business_card_for_member(self, db_session, team_repository):
        member = await TeamFactory.create_member(team_repository)
        exported = await MarketingService(db_session).generate(
            MaterialType.CARD, {"member_id": str(member.id)}, ExportFormat.JPG, scale=1
        )
        assert exported.filename == "qanzak-card-design.jpg"
        assert Image.open(io.BytesIO(exported.content)).size == (525, 300)

    async def test_business_card_requires_member(self, db_session):
        with pytest.raises(PydanticValidationError):
            await MarketingService(db_session).generate(MaterialType.CARD, {}, scale=1)

    async def test_business_card_unknown_member(self, db_session):
        with pytest.raises(TeamMemberNotFoundError):
            await MarketingService(db_session).generate(
                MaterialType.CARD, {"member_id": str(uuid.uuid4())}, scale=1
            )

    async def test_property_brochure(self, db_session, property_repository):
        listing = await PropertyFactory.create_property(property_repository)
        exported = await MarketingService(db_session).generate(
            MaterialType.BROCHURE, {"type": "property", "property_id": str(listing.id)}, ExportFormat.PDF, scale=1
        )
        assert exported.content.startswith(b"%PDF")

    async def test_property_brochure_unknown_listing(self, db_session):
        with pytest.raises(PropertyNotFoundError):
            await MarketingService(db_session).generate(
                MaterialType.BROCHURE, {"type": "property", "property_id": str(uuid.uuid4())}, scale=1
            )

    async def test_company_brochure_with_team(self, db_session, team_repository):
        await TeamFactory.create_member(team_repository)
        exported = await MarketingService(db_session).generate(
            MaterialType.BROCHURE, {"type": "company"}, ExportFormat.ZIP, scale=1
        )
        with zipfile.ZipFile(io.BytesIO(exported.content)) as archive:
            assert len(archive.namelist()) == 3

    async def test_scale_out_of_range(self, db_session):
        with pytest.raises(BadRequestError):
            await MarketingService(db_session).generate(MaterialType.SOCIAL, {}, scale=5)

    async def test_invalid_colour_rejected(self, db_session):
        with pytest.raises(PydanticValidationError):
            await MarketingService(db_session).generate(MaterialType.SOCIAL, {"bg_color": "blue"}, scale=1)

    async def test_contact_falls_back_to_first_active_member(self, db_session, team_repository):
        await TeamFactory.create_member(team_repository, name="Inactive Agent", sort_order=0, is_active=False)
        await TeamFactory.create_member(team_repository, name="Active Agent", sort_order=1)

        contact = await MarketingService(db_session)._contact(None)
        assert contact.name == "Active Agent"

    async def test_contact_falls_back_to_company(self, db_session):
        service = MarketingService(db_session)
        contact = await service._contact(None)
        assert contact.name == service.branding.name
