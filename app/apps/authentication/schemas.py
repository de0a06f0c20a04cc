"""
Pydantic schemas for authentication
"""
from pydantic import BaseModel
from typing import Optional, Dict, Any


class LoginRequest(BaseModel):
    """Login request schema"""
    # Optional so a missing field gets the router's "required" message
    username: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    """Login response schema"""
    token: str
    username: str


class VerifyResponse(BaseModel):
    """Token verification response schema"""
    valid: bool
    user: Dict[str, Any]
