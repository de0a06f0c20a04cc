"""
Pydantic schemas for the site content API
"""
from pydantic import BaseModel, Field
from typing import Optional, Any
from datetime import datetime


class SiteDataUpdate(BaseModel):
    """Body of POST /sitedata; any JSON value is accepted as the document"""
    data: Any = None


class SiteDataResponse(BaseModel):
    """Site content response schema"""
    success: bool = True
    data: Any = None


class SiteDataDebugResponse(BaseModel):
    """Diagnostic view of the stored document"""
    success: bool = True
    has_data: bool = Field(serialization_alias="hasData")
    data: Any = None
    updated_at: Optional[datetime] = Field(default=None, serialization_alias="updatedAt")
    authenticated: bool = False


class MessageResponse(BaseModel):
    """Generic success message"""
    success: bool = True
    message: str
