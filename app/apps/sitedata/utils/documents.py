"""
Reading and writing the site document
Shared by the router and the maintenance scripts
"""
from typing import Any, Optional
import logging

from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import SITE_DATA_KEY
from app.apps.sitedata.models import SiteData, utcnow

logger = logging.getLogger(__name__)

UPSERT_ATTEMPTS = 3


async def fetch_site_data(session: AsyncSession, data_key: str = SITE_DATA_KEY) -> Optional[SiteData]:
    result = await session.execute(select(SiteData).where(SiteData.data_key == data_key))
    return result.scalar_one_or_none()


async def upsert_site_data(session: AsyncSession, data: Any, data_key: str = SITE_DATA_KEY) -> SiteData:
    """
    Store `data` as the document for `data_key`, creating the row if needed.
    The previous content is replaced whole; there is no version check.

    Writers creating the first document at the same time race on the unique
    key. The loser rolls back and writes again as an update, so the last
    write wins instead of failing.
    """
    for _ in range(UPSERT_ATTEMPTS):
        site_data = await fetch_site_data(session, data_key)
        if site_data is None:
            site_data = SiteData(data_key=data_key, data=data)
            session.add(site_data)
            logger.info(f"Creating site data document '{data_key}'")
        else:
            site_data.data = data
            site_data.updated_at = utcnow()

        try:
            await session.commit()
        except IntegrityError as e:
            await session.rollback()
            logger.warning(f"Site data '{data_key}' was created concurrently, retrying as update: {e.orig}")
            continue

        await session.refresh(site_data)
        return site_data

    raise RuntimeError(f"Could not store site data '{data_key}' after {UPSERT_ATTEMPTS} attempts")


async def delete_site_data(session: AsyncSession, data_key: str = SITE_DATA_KEY) -> int:
    """Remove the document so readers fall back to the defaults."""
    result = await session.execute(delete(SiteData).where(SiteData.data_key == data_key))
    await session.commit()
    return result.rowcount or 0
