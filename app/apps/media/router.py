"""
Media upload router
Stores images and videos on local disk and returns their public URL
"""
from typing import Any, Dict, Optional
from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File
from starlette.concurrency import run_in_threadpool
import logging

from app.config import UPLOAD_DIR, UPLOAD_URL_PREFIX, BACKEND_URL, MAX_UPLOAD_SIZE
from app.dependencies import get_current_user
from app.apps.media.schemas import UploadResponse
from app.apps.media.utils import (
    UploadTooLarge,
    is_allowed_file,
    generate_filename,
    save_stream,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _too_large() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
        detail="File too large"
    )


@router.post("/upload", response_model=UploadResponse, status_code=status.HTTP_200_OK)
async def upload_file(
    file: Optional[UploadFile] = File(None),
    current_user: Dict[str, Any] = Depends(get_current_user),
):
    """
    Upload one image or video (requires authentication)

    The returned URL is absolute and built from BACKEND_URL. Callers store
    it in the site document themselves.
    """
    if file is None or not file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file uploaded"
        )

    if not is_allowed_file(file.filename, file.content_type):
        logger.warning(f"Rejected upload {file.filename} ({file.content_type})")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only images and videos are allowed"
        )

    if file.size is not None and file.size > MAX_UPLOAD_SIZE:
        raise _too_large()

    filename = generate_filename(file.filename)
    destination = UPLOAD_DIR / filename

    try:
        size = await run_in_threadpool(save_stream, file.file, destination, MAX_UPLOAD_SIZE)
    except UploadTooLarge:
        raise _too_large()
    except Exception as e:
        logger.error(f"Upload error: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Upload failed: {str(e)}"
        )
    finally:
        await file.close()

    url = f"{BACKEND_URL}{UPLOAD_URL_PREFIX}/{filename}"
    logger.info(f"File uploaded: {filename} ({size} bytes) by {current_user.get('username')}")

    return UploadResponse(
        url=url,
        filename=filename,
        size=size,
        mimetype=file.content_type,
    )
