"""
Contact form submission and the admin inquiry inbox.
"""

from fastapi import APIRouter, Depends, Query, Response, status
from typing import Optional
from uuid import UUID

from brokerage.models.inquiry import InquiryStatus
from brokerage.schemas.error import get_crud_error_responses, get_public_error_responses
from brokerage.schemas.inquiry import InquiryCreate, InquiryListResponse, InquiryResponse, InquiryUpdate
from brokerage.services.inquiry import InquiryService
from brokerage.utils.dependencies import get_current_admin, get_inquiry_service

router = APIRouter(prefix="/inquiries", tags=["Inquiries"])
admin_router = APIRouter(
    prefix="/admin/inquiries",
    tags=["Admin: Inquiries"],
    dependencies=[Depends(get_current_admin)],
    responses=get_crud_error_responses(),
)


@router.post(
    "",
    response_model=InquiryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit the contact form",
    responses=get_public_error_responses()
)
async def submit_inquiry(
    inquiry_data: InquiryCreate,
    inquiry_service: InquiryService = Depends(get_inquiry_service)
) -> InquiryResponse:
    """
    Record a lead from the public site. Status always starts as "new".

    Raises:
        PropertyNotFoundError: If property_id refers to a missing listing
    """
    inquiry = await inquiry_service.submit_inquiry(inquiry_data)
    return InquiryResponse.model_validate(inquiry)


@admin_router.get("", response_model=InquiryListResponse, summary="List inquiries, newest first")
async def list_inquiries(
    status_filter: Optional[InquiryStatus] = Query(None, alias="status", description="Filter by status"),
    inquiry_service: InquiryService = Depends(get_inquiry_service)
) -> InquiryListResponse:
    inquiries = await inquiry_service.list_inquiries(status_filter)
    return InquiryListResponse(
        inquiries=[InquiryResponse.model_validate(i) for i in inquiries],
        total=len(inquiries),
    )


@admin_router.get("/{inquiry_id}", response_model=InquiryResponse, summary="Get inquiry")
async def get_inquiry(
    inquiry_id: UUID,
    inquiry_service: InquiryService = Depends(get_inquiry_service)
) -> InquiryResponse:
    inquiry = await inquiry_service.get_inquiry(inquiry_id)
    return InquiryResponse.model_validate(inquiry)


@admin_router.patch(
    "/{inquiry_id}",
    response_model=InquiryResponse,
    summary="Update inquiry status or notes",
    description="Status changes must follow new -> in_progress -> responded/closed"
)
async def update_inquiry(
    inquiry_id: UUID,
    inquiry_data: InquiryUpdate,
    inquiry_service: InquiryService = Depends(get_inquiry_service)
) -> InquiryResponse:
    inquiry = await inquiry_service.update_inquiry(inquiry_id, inquiry_data)
    return InquiryResponse.model_validate(inquiry)


@admin_router.delete("/{inquiry_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete inquiry")
async def delete_inquiry(
    inquiry_id: UUID,
    inquiry_service: InquiryService = Depends(get_inquiry_service)
) -> Response:
    await inquiry_service.delete_inquiry(inquiry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
