"""
Marketing collateral service: resolves the data a design needs and renders it.
"""

from typing import Any, Dict, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool
import logging
import uuid

from brokerage.config import get_settings
from brokerage.marketing import (
    Branding,
    Canvas,
    Contact,
    DEFAULT_SCALES,
    DESIGN_SIZES,
    ExportedFile,
    export_image,
    render_card,
    render_company_brochure,
    render_flyer,
    render_property_brochure,
    render_social,
)
from brokerage.repositories.property import PropertyRepository
from brokerage.repositories.team_member import TeamMemberRepository
from brokerage.schemas.marketing import (
    REQUEST_MODELS,
    BrochureRequest,
    BusinessCardRequest,
    ExportFormat,
    FlyerRequest,
    MaterialType,
    SocialPostRequest,
)
from brokerage.utils.exceptions import BadRequestError, PropertyNotFoundError, TeamMemberNotFoundError

logger = logging.getLogger(__name__)

MAX_SCALE = 4


class MarketingService:
    """
    Render social posts, business cards, brochures and flyers.
    """

    def __init__(self, db_session: AsyncSession, settings=None):
        self.settings = settings or get_settings()
        self.branding = Branding.from_settings(self.settings)
        self.team_repo = TeamMemberRepository(db_session)
        self.property_repo = PropertyRepository(db_session)

    async def generate(
        self,
        material: MaterialType,
        payload: Optional[Dict[str, Any]],
        fmt: ExportFormat = ExportFormat.PNG,
        scale: Optional[int] = None
    ) -> ExportedFile:
        """
        Render a design and encode it for download.

        Args:
            material: social, card, brochure or flyer
            payload: Request body; validated against the material's request model
            fmt: png, jpg, pdf or zip
            scale: Render multiplier; the material default when omitted

        Returns:
            ExportedFile with content, filename and media type

        Raises:
            pydantic.ValidationError: If the body does not fit the material
            BadRequestError: If the scale is out of range
            TeamMemberNotFoundError: If a referenced member does not exist
            PropertyNotFoundError: If a property brochure references a missing listing
        """
        request = REQUEST_MODELS[material].model_validate(payload or {})
        scale = scale or DEFAULT_SCALES[material]
        if not 1 <= scale <= MAX_SCALE:
            raise BadRequestError(f"scale must be between 1 and {MAX_SCALE}")

        canvas = self._new_canvas(material, scale)
        draw = await self._prepare(material, request, canvas)
        # Pillow work is CPU bound; keep it off the event loop
        await run_in_threadpool(draw)
        exported = await run_in_threadpool(
            export_image, canvas.image, fmt, material.value, self.settings.company_slug, scale
        )

        logger.info(
            f"Marketing {material.value} rendered as {fmt.value} at scale {scale} "
            f"({canvas.pixel_size[0]}x{canvas.pixel_size[1]}, {len(exported.content)} bytes)"
        )
        return exported

    def _new_canvas(self, material: MaterialType, scale: int) -> Canvas:
        width, height = DESIGN_SIZES[material]
        return Canvas(
            width,
            height,
            scale=scale,
            font_path=self.settings.marketing_font_path,
            bold_font_path=self.settings.marketing_bold_font_path,
        )

    async def _prepare(self, material: MaterialType, request, canvas: Canvas):
        """Load what the layout needs and return a callable that draws it."""
        if material == MaterialType.SOCIAL:
            social: SocialPostRequest = request
            contact = await self._contact(social.contact_member_id)
            return lambda: render_social(canvas, social, self.branding, contact)

        if material == MaterialType.CARD:
            card: BusinessCardRequest = request
            member = await self._member(card.member_id)
            contact = Contact.from_member(member, self.branding)
            return lambda: render_card(canvas, contact, self.branding)

        if material == MaterialType.BROCHURE:
            brochure: BrochureRequest = request
            if brochure.type == "property":
                listing = await self.property_repo.get_by_id(brochure.property_id)
                if not listing:
                    raise PropertyNotFoundError(str(brochure.property_id))
                return lambda: render_property_brochure(canvas, self.branding, listing)

            team = await self.team_repo.list_members(active_only=True)
            return lambda: render_company_brochure(canvas, self.branding, team)

        flyer: FlyerRequest = request
        contact = await self._contact(flyer.contact_member_id)
        return lambda: render_flyer(canvas, flyer, self.branding, contact)

    async def _member(self, member_id: uuid.UUID):
        member = await self.team_repo.get_by_id(member_id)
        if not member:
            raise TeamMemberNotFoundError(str(member_id))
        return member

    async def _contact(self, member_id: Optional[uuid.UUID]) -> Contact:
        """
        Contact block for a design: the chosen member, else the first active
        member, else the company itself.
        """
        if member_id is not None:
            return Contact.from_member(await self._member(member_id), self.branding)

        members = await self.team_repo.list_members(active_only=True)
        if members:
            return Contact.from_member(members[0], self.branding)
        return Contact.company(self.branding)
