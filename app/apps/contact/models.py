"""
Contact form submission model
"""
from enum import Enum
from sqlmodel import SQLModel, Field, Column
from sqlalchemy import DateTime
from typing import Optional
from datetime import datetime, timezone


class ContactStatus(str, Enum):
    NEW = "new"
    READ = "read"
    RESPONDED = "responded"


class ContactSubmission(SQLModel, table=True):
    """
    One public contact form submission
    Table: contact_submissions
    """
    __tablename__ = "contact_submissions"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=200)
    email: str = Field(max_length=200)
    phone: str = Field(max_length=50)
    people: str = Field(default="", max_length=50)
    message: str
    status: str = Field(default=ContactStatus.NEW.value, max_length=20, index=True)
    submitted_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
    )
