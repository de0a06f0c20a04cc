"""
API endpoint resolution for clients of the catering site API
"""
from dataclasses import dataclass
from typing import Optional

LOCAL_HOSTNAMES = ("localhost", "127.0.0.1")
LOCAL_API_URL = "http://localhost:5000/api"


def resolve_api_url(env_url: Optional[str] = None, hostname: str = "", scheme: str = "https") -> str:
    """
    Pick the API base URL.

    An explicit URL wins. Local hostnames talk to a backend on port 5000;
    any other host is expected to serve the API under its own `/api` path.
    """
    if env_url and env_url.strip():
        return env_url.strip().rstrip("/")
    if not hostname or hostname in LOCAL_HOSTNAMES:
        return LOCAL_API_URL
    return f"{scheme}://{hostname}/api"


@dataclass(frozen=True)
class ApiEndpoints:
    api_url: str

    @property
    def login(self) -> str:
        return f"{self.api_url}/login"

    @property
    def verify(self) -> str:
        return f"{self.api_url}/verify"

    @property
    def upload(self) -> str:
        return f"{self.api_url}/upload"

    @property
    def site_data(self) -> str:
        return f"{self.api_url}/sitedata"

    @property
    def site_data_reset(self) -> str:
        return f"{self.api_url}/sitedata/reset"

    @property
    def contact(self) -> str:
        return f"{self.api_url}/contact"

    @property
    def contacts(self) -> str:
        return f"{self.api_url}/contacts"

    def contact_item(self, contact_id) -> str:
        return f"{self.api_url}/contacts/{contact_id}"
