"""
Site content router
Public read, authenticated write and reset of the site document
"""
from typing import Any, Dict, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from app.database import get_async_session
from app.apps.authentication.dependencies import get_current_user, get_current_user_optional
from app.apps.sitedata.schemas import (
    SiteDataUpdate,
    SiteDataResponse,
    SiteDataDebugResponse,
    MessageResponse,
)
from app.apps.sitedata.utils.documents import (
    fetch_site_data,
    upsert_site_data,
    delete_site_data,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/sitedata", response_model=SiteDataResponse, status_code=status.HTTP_200_OK)
async def get_site_data(session: AsyncSession = Depends(get_async_session)):
    """
    Get the stored site document (public endpoint, no auth required).
    `data` is null when nothing has been saved yet and clients use their defaults.
    """
    try:
        site_data = await fetch_site_data(session)
    except Exception as e:
        logger.error(f"Get site data error: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to get site data: {str(e)}"
        )

    if site_data is None:
        return SiteDataResponse(data=None)
    return SiteDataResponse(data=site_data.data)


@router.get("/sitedata/debug", response_model=SiteDataDebugResponse, status_code=status.HTTP_200_OK)
async def debug_site_data(
    session: AsyncSession = Depends(get_async_session),
    current_user: Optional[Dict[str, Any]] = Depends(get_current_user_optional),
):
    """Show whether a document is stored and when it last changed."""
    try:
        site_data = await fetch_site_data(session)
    except Exception as e:
        logger.error(f"Debug site data error: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Debug failed: {str(e)}"
        )

    return SiteDataDebugResponse(
        has_data=site_data is not None,
        data=site_data.data if site_data else None,
        updated_at=site_data.updated_at if site_data else None,
        authenticated=current_user is not None,
    )


@router.post("/sitedata", response_model=SiteDataResponse, status_code=status.HTTP_200_OK)
async def update_site_data(
    request: SiteDataUpdate,
    session: AsyncSession = Depends(get_async_session),
    current_user: Dict[str, Any] = Depends(get_current_user),
):
    """
    Replace the site document (requires authentication).
    The document is stored verbatim; concurrent writers overwrite each other.
    """
    if request.data is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No data provided"
        )

    try:
        site_data = await upsert_site_data(session, request.data)
    except Exception as e:
        await session.rollback()
        logger.error(f"Update site data error: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update site data: {str(e)}"
        )

    logger.info(f"Site data updated by {current_user.get('username')}")
    return SiteDataResponse(data=site_data.data)


@router.delete("/sitedata/reset", response_model=MessageResponse, status_code=status.HTTP_200_OK)
async def reset_site_data(
    session: AsyncSession = Depends(get_async_session),
    current_user: Dict[str, Any] = Depends(get_current_user),
):
    """Delete the stored document so the defaults apply again (requires authentication)."""
    try:
        removed = await delete_site_data(session)
    except Exception as e:
        await session.rollback()
        logger.error(f"Reset site data error: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to reset site data: {str(e)}"
        )

    logger.info(f"Site data reset by {current_user.get('username')} ({removed} document(s) removed)")
    return MessageResponse(message="Site data reset to defaults")
