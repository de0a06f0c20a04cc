"""
Contact inbox poller for the admin "new submissions" badge
"""
import asyncio
from typing import Any, Dict, List
import logging

import httpx

from app.client.api import ApiError, SiteApiClient

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 30.0


class ContactInbox:
    def __init__(self, api: SiteApiClient):
        self.api = api
        self.contacts: List[Dict[str, Any]] = []
        self.new_count = 0

    async def refresh(self) -> int:
        """Reload the submissions and return how many are still `new`."""
        try:
            self.contacts = await self.api.list_contacts()
        except (ApiError, httpx.HTTPError, ValueError) as e:
            logger.error(f"Failed to fetch contacts: {e}")
            return self.new_count

        self.new_count = sum(1 for contact in self.contacts if contact.get("status") == "new")
        return self.new_count

    async def poll(self, interval: float = DEFAULT_POLL_INTERVAL) -> None:
        """Refresh now and then every `interval` seconds until cancelled."""
        while True:
            await self.refresh()
            await asyncio.sleep(interval)
