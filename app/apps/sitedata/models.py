"""
Site content document model
"""
from sqlmodel import SQLModel, Field, Column
from sqlalchemy import DateTime
from typing import Optional, Any
from datetime import datetime, timezone

from app.common.fields import JSONDocument
from app.config import SITE_DATA_KEY


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SiteData(SQLModel, table=True):
    """
    The editable content of the whole site, one row per key
    Table: site_data
    """
    __tablename__ = "site_data"

    id: Optional[int] = Field(default=None, primary_key=True)
    data_key: str = Field(default=SITE_DATA_KEY, max_length=50, unique=True, index=True)
    data: Any = Field(sa_column=Column(JSONDocument, nullable=False))
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
