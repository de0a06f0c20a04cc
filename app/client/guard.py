"""
Admin session guard
Decides whether the admin area may be shown for the stored credentials
"""
from enum import Enum
import logging

import httpx

from app.client.api import ApiError, SiteApiClient

logger = logging.getLogger(__name__)


class GuardResult(str, Enum):
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"
    BACKEND_UNREACHABLE = "backend_unreachable"


class SessionGuard:
    """
    Verifies the held token against `/verify`.

    An unreachable backend denies access unless `allow_when_unreachable` is
    set, which is meant for local development against a stopped backend.
    """

    def __init__(self, api: SiteApiClient, allow_when_unreachable: bool = False):
        self.api = api
        self.allow_when_unreachable = allow_when_unreachable
        self.error = ""

    async def check(self) -> GuardResult:
        self.error = ""
        if not self.api.credentials.is_authenticated:
            logger.info("No token found, redirecting to login")
            return GuardResult.UNAUTHENTICATED

        try:
            await self.api.verify()
        except ApiError as e:
            logger.info(f"Token rejected ({e.status_code}), clearing credentials")
            self.api.credentials.clear()
            return GuardResult.UNAUTHENTICATED
        except (httpx.HTTPError, ValueError) as e:
            # ValueError: a 2xx body that is not JSON, e.g. a proxy error page
            logger.error(f"Token verification error: {e}")
            self.error = "Cannot connect to backend."
            return GuardResult.BACKEND_UNREACHABLE

        return GuardResult.AUTHENTICATED

    def allows_access(self, result: GuardResult) -> bool:
        if result is GuardResult.AUTHENTICATED:
            return True
        return result is GuardResult.BACKEND_UNREACHABLE and self.allow_when_unreachable
