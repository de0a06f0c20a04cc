"""
Client package: API client, site document store, session guard and inbox
"""
from app.client.api import ApiError, Credentials, SiteApiClient
from app.client.endpoints import ApiEndpoints, resolve_api_url
from app.client.guard import GuardResult, SessionGuard
from app.client.inbox import ContactInbox
from app.client.store import SiteDataStore, StoreState

__all__ = [
    "ApiError",
    "ApiEndpoints",
    "ContactInbox",
    "Credentials",
    "GuardResult",
    "SessionGuard",
    "SiteApiClient",
    "SiteDataStore",
    "StoreState",
    "resolve_api_url",
]
