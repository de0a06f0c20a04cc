"""
Authentication router
Administrator login and token verification
"""
from typing import Any, Dict
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from app.database import get_async_session
from app.apps.authentication.schemas import LoginRequest, LoginResponse, VerifyResponse
from app.apps.authentication.dependencies import get_current_user
from app.apps.authentication.utils import authenticate_user, create_access_token

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=LoginResponse, status_code=status.HTTP_200_OK)
async def login(
    request: LoginRequest,
    session: AsyncSession = Depends(get_async_session),
):
    """
    Exchange administrator credentials for a 24 hour bearer token.
    Unknown users and wrong passwords get the same response.
    """
    if not request.username or not request.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username and password required"
        )

    try:
        user = await authenticate_user(session, request.username, request.password)
    except Exception as e:
        logger.error(f"Login error: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error"
        )

    if user is None:
        logger.warning(f"Failed login attempt for username: {request.username}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials"
        )

    logger.info(f"User logged in successfully: {user.username}")
    return LoginResponse(token=create_access_token(user), username=user.username)


@router.get("/verify", response_model=VerifyResponse, status_code=status.HTTP_200_OK)
async def verify(current_user: Dict[str, Any] = Depends(get_current_user)):
    """Echo the decoded claims of a valid token."""
    return VerifyResponse(valid=True, user=current_user)
