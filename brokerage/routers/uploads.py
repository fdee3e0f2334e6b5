"""
Generic image upload used for team photos and listing cover images.
"""

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from typing import Optional

from brokerage.schemas.error import get_error_responses
from brokerage.schemas.upload import UploadResponse
from brokerage.services.upload import UploadService
from brokerage.utils.dependencies import get_current_admin, get_upload_service

router = APIRouter(
    prefix="/admin/uploads",
    tags=["Admin: Uploads"],
    dependencies=[Depends(get_current_admin)],
)


@router.post(
    "",
    response_model=UploadResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload an image",
    description="JPG, PNG or WebP. Files are served under the uploads URL prefix.",
    responses=get_error_responses(400, 401, 422, 500)
)
async def upload_image(
    file: UploadFile = File(..., description="Image file"),
    folder: Optional[str] = Form(None, description="Sub-folder, e.g. team or properties"),
    upload_service: UploadService = Depends(get_upload_service)
) -> UploadResponse:
    """
    Store an image and return its public URL.

    Raises:
        UnsupportedFileTypeError: If the file is not JPG, PNG or WebP
        FileSizeExceededError: If the file exceeds the photo size limit
        FileUploadError: If the content is not a valid image
    """
    return await upload_service.upload_image(file, folder)
