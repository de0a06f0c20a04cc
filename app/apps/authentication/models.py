"""
Authentication models
"""
from sqlmodel import SQLModel, Field
from typing import Optional


class User(SQLModel, table=True):
    """
    Administrator account
    Table: users
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(max_length=100, unique=True, index=True)
    password_hash: str = Field(max_length=255)
