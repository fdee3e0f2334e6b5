"""
Marketing collateral generator: renders a design and returns it as a download.
"""

from fastapi import APIRouter, Body, Depends, Path, Query, Response
from typing import Any, Dict, Optional

from brokerage.schemas.error import get_error_responses
from brokerage.schemas.marketing import ExportFormat, MaterialType
from brokerage.services.marketing import MAX_SCALE, MarketingService
from brokerage.utils.dependencies import get_current_admin, get_marketing_service

router = APIRouter(
    prefix="/admin/marketing",
    tags=["Admin: Marketing"],
    dependencies=[Depends(get_current_admin)],
)


@router.post(
    "/{material}",
    summary="Render marketing material",
    description=(
        "Render a social post, business card, brochure or flyer as PNG, JPG, PDF, "
        "or a ZIP holding all three. The body fields depend on the material."
    ),
    response_class=Response,
    responses={
        200: {
            "content": {
                "image/png": {},
                "image/jpeg": {},
                "application/pdf": {},
                "application/zip": {},
            },
            "description": "The rendered file as an attachment",
        },
        **get_error_responses(400, 401, 404, 422, 500),
    }
)
async def render_material(
    material: MaterialType = Path(..., description="social, card, brochure or flyer"),
    export_format: ExportFormat = Query(ExportFormat.PNG, alias="format", description="png, jpg, pdf or zip"),
    scale: Optional[int] = Query(None, ge=1, le=MAX_SCALE, description="Render multiplier"),
    payload: Optional[Dict[str, Any]] = Body(None),
    marketing_service: MarketingService = Depends(get_marketing_service)
) -> Response:
    """
    Render a design and send it as a file download.

    Raises:
        TeamMemberNotFoundError: If a referenced team member does not exist
        PropertyNotFoundError: If a property brochure references a missing listing
    """
    exported = await marketing_service.generate(material, payload, export_format, scale)
    return Response(
        content=exported.content,
        media_type=exported.media_type,
        headers={"Content-Disposition": f'attachment; filename="{exported.filename}"'},
    )
