"""
Async HTTP client for the catering site API
"""
import time
from dataclasses import dataclass
from typing import Any, BinaryIO, Dict, List, Optional, Union
import logging

import httpx

from app.client.endpoints import ApiEndpoints

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-success response from the API."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


@dataclass
class Credentials:
    """Bearer token and username of the signed-in administrator"""
    token: Optional[str] = None
    username: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def set(self, token: str, username: str) -> None:
        self.token = token
        self.username = username

    def clear(self) -> None:
        self.token = None
        self.username = None


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict):
        return str(body.get("message") or body.get("detail") or response.reason_phrase)
    return response.reason_phrase


class SiteApiClient:
    """
    Thin wrapper over the REST API.

    Pass `http_client` to reuse a configured `httpx.AsyncClient` (for example
    one using an ASGI transport); otherwise one is created and owned here.
    """

    def __init__(
        self,
        api_url: str,
        credentials: Optional[Credentials] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ):
        self.endpoints = ApiEndpoints(api_url.rstrip("/"))
        self.credentials = credentials or Credentials()
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> "SiteApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    def _auth_headers(self) -> Dict[str, str]:
        if not self.credentials.token:
            return {}
        return {"Authorization": f"Bearer {self.credentials.token}"}

    async def _send(self, method: str, url: str, authenticated: bool = False, **kwargs) -> Any:
        if authenticated:
            kwargs["headers"] = {**kwargs.get("headers", {}), **self._auth_headers()}
        response = await self._http.request(method, url, **kwargs)

        if response.status_code == 401 and authenticated:
            # A rejected token is useless from now on
            self.credentials.clear()
        if response.is_error:
            raise ApiError(response.status_code, _error_message(response))
        return response.json()

    async def login(self, username: str, password: str) -> Dict[str, Any]:
        result = await self._send(
            "POST", self.endpoints.login, json={"username": username, "password": password}
        )
        self.credentials.set(result["token"], result["username"])
        logger.info(f"Signed in as {result['username']}")
        return result

    def logout(self) -> None:
        self.credentials.clear()

    async def verify(self) -> Dict[str, Any]:
        """Return the token claims; raises ApiError(401) for a bad token."""
        result = await self._send("GET", self.endpoints.verify, authenticated=True)
        return result["user"]

    async def fetch_site_data(self) -> Optional[Any]:
        """The stored document, or None if the server has none yet."""
        result = await self._send(
            "GET",
            self.endpoints.site_data,
            params={"t": int(time.time() * 1000)},
            headers={"Cache-Control": "no-cache", "Pragma": "no-cache"},
        )
        if result.get("success"):
            return result.get("data")
        return None

    async def save_site_data(self, data: Any) -> bool:
        """
        Store the document. Returns False without a request when signed out,
        and False (after logging) when the request fails.
        """
        if not self.credentials.is_authenticated:
            return False

        try:
            result = await self._send(
                "POST", self.endpoints.site_data, authenticated=True, json={"data": data}
            )
        except (ApiError, httpx.HTTPError) as e:
            logger.error(f"Failed to save data to server: {e}")
            return False
        return bool(result.get("success"))

    async def reset_site_data(self) -> None:
        await self._send("DELETE", self.endpoints.site_data_reset, authenticated=True)

    async def upload_file(
        self,
        filename: str,
        content: Union[bytes, BinaryIO],
        content_type: str,
    ) -> Dict[str, Any]:
        """Upload one media file and return {url, filename, size, mimetype}."""
        return await self._send(
            "POST",
            self.endpoints.upload,
            authenticated=True,
            files={"file": (filename, content, content_type)},
        )

    async def submit_contact(
        self,
        name: str,
        email: str,
        phone: str,
        message: str,
        people: Optional[str] = None,
    ) -> Dict[str, Any]:
        payload = {"name": name, "email": email, "phone": phone, "message": message}
        if people:
            payload["people"] = people
        return await self._send("POST", self.endpoints.contact, json=payload)

    async def list_contacts(self) -> List[Dict[str, Any]]:
        result = await self._send("GET", self.endpoints.contacts, authenticated=True)
        return result["contacts"]

    async def update_contact_status(self, contact_id: int, status: str) -> Dict[str, Any]:
        result = await self._send(
            "PATCH", self.endpoints.contact_item(contact_id), authenticated=True, json={"status": status}
        )
        return result["contact"]

    async def delete_contact(self, contact_id: int) -> None:
        await self._send("DELETE", self.endpoints.contact_item(contact_id), authenticated=True)
