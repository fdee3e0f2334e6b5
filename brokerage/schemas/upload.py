"""
Schemas for generic image uploads.
"""

from pydantic import BaseModel, Field


class UploadResponse(BaseModel):
    """Stored upload and the public URL it is served from."""

    url: str = Field(..., examples=["/uploads/team/3f0c1c1e-5a0e-4f43-9a55-2f5d0c6f1a3b.jpg"])
    object_path: str = Field(..., description="Path relative to the upload directory")
    size: int = Field(..., description="Size in bytes")
    content_type: str
