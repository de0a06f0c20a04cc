"""
Pydantic schemas for contact submissions
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Union
from datetime import datetime


class ContactCreate(BaseModel):
    """
    Public contact form body.
    Required fields are checked in the router so a missing one is a 400.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    people: Optional[Union[str, int]] = None
    message: Optional[str] = None

    @field_validator("people")
    @classmethod
    def people_as_text(cls, value):
        return "" if value is None else str(value)

    def missing_required(self) -> bool:
        return any(
            not (value or "").strip()
            for value in (self.name, self.email, self.phone, self.message)
        )


class ContactCreateResponse(BaseModel):
    success: bool = True
    message: str
    id: int


class ContactStatusUpdate(BaseModel):
    # Plain string so an unknown value gets the router's own message
    status: Optional[str] = None


class ContactResponse(BaseModel):
    """Contact submission response schema"""
    id: int
    name: str
    email: str
    phone: str
    people: str = ""
    message: str
    status: str
    submitted_at: datetime = Field(serialization_alias="submittedAt")

    class Config:
        from_attributes = True


class ContactListResponse(BaseModel):
    success: bool = True
    contacts: List[ContactResponse]


class ContactUpdateResponse(BaseModel):
    success: bool = True
    contact: ContactResponse


class ContactDeleteResponse(BaseModel):
    success: bool = True
    message: str
