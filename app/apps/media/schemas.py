"""
Pydantic schemas for media uploads
"""
from pydantic import BaseModel


class UploadResponse(BaseModel):
    """Upload response"""
    success: bool = True
    url: str
    filename: str
    size: int
    mimetype: str
