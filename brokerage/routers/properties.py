"""
Property catalog endpoints: the public listing search and the admin listing CRUD.
"""

from fastapi import APIRouter, Depends, Query, Response, status
from typing import List, Optional
from uuid import UUID
import logging

from brokerage.config import settings
from brokerage.models.property import PropertyStatus, PropertyType
from brokerage.schemas.error import get_crud_error_responses, get_public_error_responses
from brokerage.schemas.media import MediaResponse
from brokerage.schemas.property import (
    PropertyCreate,
    PropertyListResponse,
    PropertyResponse,
    PropertySearchFilters,
    PropertyUpdate,
)
from brokerage.services.media import MediaService
from brokerage.services.property import PropertyService
from brokerage.utils.dependencies import get_current_admin, get_media_service, get_property_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/properties", tags=["Properties"])
admin_router = APIRouter(
    prefix="/admin/properties",
    tags=["Admin: Properties"],
    dependencies=[Depends(get_current_admin)],
)


def catalog_filters(
    status: Optional[PropertyStatus] = Query(None, description="For Sale or For Rent"),
    property_type: Optional[PropertyType] = Query(None, alias="type", description="Property type"),
    city: Optional[str] = Query(None, max_length=100, description="City (case-insensitive)"),
    min_price: Optional[int] = Query(None, ge=0, description="Minimum price"),
    max_price: Optional[int] = Query(None, ge=0, description="Maximum price"),
    min_price_camel: Optional[int] = Query(None, ge=0, alias="minPrice", include_in_schema=False),
    max_price_camel: Optional[int] = Query(None, ge=0, alias="maxPrice", include_in_schema=False),
    bedrooms: Optional[int] = Query(None, ge=0, le=50, description="Minimum number of bedrooms"),
    featured: Optional[bool] = Query(None, description="Only featured listings when true"),
    q: Optional[str] = Query(None, max_length=255, description="Search title, location and city"),
    page: int = Query(1, ge=1, description="Page number (starts from 1)"),
    page_size: int = Query(
        settings.default_page_size, ge=1, le=settings.max_page_size, description="Listings per page"
    ),
    sort_by: str = Query("created_at", description="created_at, price, area or title"),
    sort_order: str = Query("desc", description="asc or desc"),
) -> PropertySearchFilters:
    """Build catalog filters from query parameters; camelCase price aliases are accepted."""
    return PropertySearchFilters(
        status=status,
        property_type=property_type,
        city=city,
        min_price=min_price if min_price is not None else min_price_camel,
        max_price=max_price if max_price is not None else max_price_camel,
        bedrooms=bedrooms,
        featured=featured,
        query=q,
        page=page,
        page_size=page_size,
        sort_by=sort_by,
        sort_order=sort_order,
    )


# Public catalog

@router.get(
    "",
    response_model=PropertyListResponse,
    summary="List properties with search and filtering",
    responses=get_public_error_responses()
)
async def list_properties(
    filters: PropertySearchFilters = Depends(catalog_filters),
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyListResponse:
    """
    Paginated catalog. Zero or empty numeric filters are ignored.
    """
    return await property_service.search_properties(filters)


@router.get(
    "/{property_id}",
    response_model=PropertyResponse,
    summary="Get property by ID",
    responses=get_public_error_responses()
)
async def get_property(
    property_id: UUID,
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyResponse:
    property_obj = await property_service.get_property(property_id)
    return PropertyResponse.model_validate(property_obj)


@router.get(
    "/{property_id}/media",
    response_model=List[MediaResponse],
    summary="List a property's media in display order",
    responses=get_public_error_responses()
)
async def list_property_media(
    property_id: UUID,
    media_service: MediaService = Depends(get_media_service)
) -> List[MediaResponse]:
    media = await media_service.list_media(property_id)
    return [MediaResponse.model_validate(m) for m in media]


# Admin listings

@admin_router.get(
    "",
    response_model=PropertyListResponse,
    summary="List properties (admin)",
    responses=get_crud_error_responses()
)
async def admin_list_properties(
    filters: PropertySearchFilters = Depends(catalog_filters),
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyListResponse:
    return await property_service.search_properties(filters)


@admin_router.get(
    "/{property_id}",
    response_model=PropertyResponse,
    summary="Get property (admin)",
    responses=get_crud_error_responses()
)
async def admin_get_property(
    property_id: UUID,
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyResponse:
    property_obj = await property_service.get_property(property_id)
    return PropertyResponse.model_validate(property_obj)


@admin_router.post(
    "",
    response_model=PropertyResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create new property",
    responses=get_crud_error_responses()
)
async def create_property(
    property_data: PropertyCreate,
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyResponse:
    """
    Create a new property listing.

    Args:
        property_data: Property creation data
        property_service: Property service instance

    Returns:
        Created property

    Raises:
        ValidationError: If property data violates a model rule
    """
    property_obj = await property_service.create_property(property_data)
    return PropertyResponse.model_validate(property_obj)


@admin_router.put(
    "/{property_id}",
    response_model=PropertyResponse,
    summary="Update property",
    description="Partial update: only the fields sent are changed",
    responses=get_crud_error_responses()
)
async def update_property(
    property_id: UUID,
    property_data: PropertyUpdate,
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyResponse:
    property_obj = await property_service.update_property(property_id, property_data)
    return PropertyResponse.model_validate(property_obj)


@admin_router.delete(
    "/{property_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete property",
    description="Deletes the listing, its media rows and locally stored files",
    responses=get_crud_error_responses()
)
async def delete_property(
    property_id: UUID,
    property_service: PropertyService = Depends(get_property_service)
) -> Response:
    await property_service.delete_property(property_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
