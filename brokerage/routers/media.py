"""
Admin media gallery endpoints: add by URL, upload, edit, feature, reorder and delete.
"""

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status
from typing import List, Optional
from uuid import UUID

from brokerage.models.media import MediaType
from brokerage.schemas.error import get_crud_error_responses
from brokerage.schemas.media import MediaCreate, MediaOrderRequest, MediaResponse, MediaUpdate
from brokerage.services.media import MediaService
from brokerage.utils.dependencies import get_current_admin, get_media_service

router = APIRouter(
    prefix="/admin",
    tags=["Admin: Media"],
    dependencies=[Depends(get_current_admin)],
    responses=get_crud_error_responses(),
)


@router.post(
    "/properties/{property_id}/media",
    response_model=MediaResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add media by URL",
    description="Video platform and id are derived from YouTube or Vimeo links when omitted"
)
async def add_media(
    property_id: UUID,
    media_data: MediaCreate,
    media_service: MediaService = Depends(get_media_service)
) -> MediaResponse:
    media = await media_service.add_media(property_id, media_data)
    return MediaResponse.model_validate(media)


@router.post(
    "/properties/{property_id}/media/upload",
    response_model=MediaResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload an image or floor plan"
)
async def upload_media(
    property_id: UUID,
    file: UploadFile = File(..., description="JPG, PNG or WebP file"),
    media_type: MediaType = Form(MediaType.IMAGE, description="image or floorplan"),
    caption: Optional[str] = Form(None, max_length=500),
    is_featured: bool = Form(False),
    media_service: MediaService = Depends(get_media_service)
) -> MediaResponse:
    """
    Upload a file to a property's gallery.

    Args:
        property_id: Listing to attach to
        file: Image file
        media_type: image or floorplan
        caption: Optional caption
        is_featured: Make it the featured image

    Returns:
        Created media with its thumbnail URL
    """
    media = await media_service.upload_media(property_id, file, media_type, caption, is_featured)
    return MediaResponse.model_validate(media)


@router.put(
    "/properties/{property_id}/media/order",
    response_model=List[MediaResponse],
    summary="Reorder a property's media",
    description="media_ids must list every media item of the property exactly once"
)
async def reorder_media(
    property_id: UUID,
    order: MediaOrderRequest,
    media_service: MediaService = Depends(get_media_service)
) -> List[MediaResponse]:
    media = await media_service.reorder_media(property_id, order.media_ids)
    return [MediaResponse.model_validate(m) for m in media]


@router.patch(
    "/media/{media_id}",
    response_model=MediaResponse,
    summary="Update media metadata"
)
async def update_media(
    media_id: UUID,
    media_data: MediaUpdate,
    media_service: MediaService = Depends(get_media_service)
) -> MediaResponse:
    media = await media_service.update_media(media_id, media_data)
    return MediaResponse.model_validate(media)


@router.post(
    "/media/{media_id}/feature",
    response_model=MediaResponse,
    summary="Make this the featured image"
)
async def feature_media(
    media_id: UUID,
    media_service: MediaService = Depends(get_media_service)
) -> MediaResponse:
    media = await media_service.feature_media(media_id)
    return MediaResponse.model_validate(media)


@router.delete(
    "/media/{media_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete media",
    description="Remaining media are renumbered 0..n-1"
)
async def delete_media(
    media_id: UUID,
    media_service: MediaService = Depends(get_media_service)
) -> Response:
    await media_service.delete_media(media_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
