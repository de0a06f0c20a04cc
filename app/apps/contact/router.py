"""
Contact submissions router
Public form submission plus the administrator inbox
"""
from typing import Any, Dict
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
import logging

from app.dependencies import get_db, get_current_user
from app.apps.contact.models import ContactSubmission, ContactStatus
from app.apps.contact.schemas import (
    ContactCreate,
    ContactCreateResponse,
    ContactStatusUpdate,
    ContactResponse,
    ContactListResponse,
    ContactUpdateResponse,
    ContactDeleteResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

VALID_STATUSES = {s.value for s in ContactStatus}


async def _get_contact_or_404(session: AsyncSession, contact_id: int) -> ContactSubmission:
    contact = await session.get(ContactSubmission, contact_id)
    if contact is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Contact not found"
        )
    return contact


@router.post("/contact", response_model=ContactCreateResponse, status_code=status.HTTP_200_OK)
async def submit_contact(
    request: ContactCreate,
    session: AsyncSession = Depends(get_db),
):
    """
    Store a contact form submission (public endpoint, no auth required).
    """
    if request.missing_required():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Name, email, phone, and message are required"
        )

    try:
        submission = ContactSubmission(
            name=request.name.strip(),
            email=request.email.strip(),
            phone=request.phone.strip(),
            people=request.people or "",
            message=request.message,
        )
        session.add(submission)
        await session.commit()
        await session.refresh(submission)
    except Exception as e:
        await session.rollback()
        logger.error(f"Contact submission error: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to submit contact form: {str(e)}"
        )

    logger.info(f"Contact submission {submission.id} received")
    return ContactCreateResponse(
        message="Contact form submitted successfully",
        id=submission.id,
    )


@router.get("/contacts", response_model=ContactListResponse, status_code=status.HTTP_200_OK)
async def list_contacts(
    session: AsyncSession = Depends(get_db),
    current_user: Dict[str, Any] = Depends(get_current_user),
):
    """
    List every submission, newest first (requires authentication)
    """
    try:
        stmt = select(ContactSubmission).order_by(
            ContactSubmission.submitted_at.desc(),
            ContactSubmission.id.desc(),
        )
        result = await session.execute(stmt)
        contacts = result.scalars().all()
    except Exception as e:
        logger.error(f"Get contacts error: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to get contacts: {str(e)}"
        )

    return ContactListResponse(
        contacts=[ContactResponse.model_validate(contact) for contact in contacts]
    )


@router.patch("/contacts/{contact_id}", response_model=ContactUpdateResponse, status_code=status.HTTP_200_OK)
async def update_contact_status(
    contact_id: int,
    request: ContactStatusUpdate,
    session: AsyncSession = Depends(get_db),
    current_user: Dict[str, Any] = Depends(get_current_user),
):
    """
    Change the status of a submission to new, read or responded (requires authentication)
    """
    if request.status not in VALID_STATUSES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid status"
        )

    try:
        contact = await _get_contact_or_404(session, contact_id)
        contact.status = request.status
        await session.commit()
        await session.refresh(contact)
    except HTTPException:
        raise
    except Exception as e:
        await session.rollback()
        logger.error(f"Update contact status error: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update contact status: {str(e)}"
        )

    logger.info(f"Contact {contact_id} marked as {request.status}")
    return ContactUpdateResponse(contact=ContactResponse.model_validate(contact))


@router.delete("/contacts/{contact_id}", response_model=ContactDeleteResponse, status_code=status.HTTP_200_OK)
async def delete_contact(
    contact_id: int,
    session: AsyncSession = Depends(get_db),
    current_user: Dict[str, Any] = Depends(get_current_user),
):
    """
    Permanently delete a submission (requires authentication)
    """
    try:
        contact = await _get_contact_or_404(session, contact_id)
        await session.delete(contact)
        await session.commit()
    except HTTPException:
        raise
    except Exception as e:
        await session.rollback()
        logger.error(f"Delete contact error: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete contact: {str(e)}"
        )

    logger.info(f"Contact {contact_id} deleted")
    return ContactDeleteResponse(message="Contact deleted successfully")
