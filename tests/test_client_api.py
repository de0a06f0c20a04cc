"""
Tests for the async API client, the session guard and the contact inbox.
The client talks to the app in-process through an ASGI transport.
"""
import asyncio

import httpx
import pytest

from app.client.api import ApiError, Credentials, SiteApiClient
from app.client.endpoints import ApiEndpoints, LOCAL_API_URL, resolve_api_url
from app.client.guard import GuardResult, SessionGuard
from app.client.inbox import ContactInbox
from app.client.store import SiteDataStore
from app.config import ADMIN_USERNAME, ADMIN_PASSWORD

TEST_API_URL = "http://testserver/api"


def unreachable_client() -> SiteApiClient:
    def refuse(request):
        raise httpx.ConnectError("Connection refused", request=request)

    http = httpx.AsyncClient(transport=httpx.MockTransport(refuse))
    return SiteApiClient(TEST_API_URL, credentials=Credentials("token", "admin"), http_client=http)


class TestAuthFlow:
    @pytest.mark.asyncio
    async def test_login_verify_logout(self, api_client):
        result = await api_client.login(ADMIN_USERNAME, ADMIN_PASSWORD)

        assert result["username"] == ADMIN_USERNAME
        assert api_client.credentials.is_authenticated
        user = await api_client.verify()
        assert user["username"] == ADMIN_USERNAME

        api_client.logout()
        assert api_client.credentials.token is None

    @pytest.mark.asyncio
    async def test_wrong_password(self, api_client):
        with pytest.raises(ApiError) as exc_info:
            await api_client.login(ADMIN_USERNAME, "nope")

        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "Invalid credentials"
        assert not api_client.credentials.is_authenticated

    @pytest.mark.asyncio
    async def test_rejected_token_is_cleared(self, api_client):
        api_client.credentials.set("forged", "admin")

        with pytest.raises(ApiError):
            await api_client.verify()

        assert api_client.credentials.token is None


class TestSiteData:
    @pytest.mark.asyncio
    async def test_save_then_fetch(self, api_client):
        await api_client.login(ADMIN_USERNAME, ADMIN_PASSWORD)

        assert await api_client.fetch_site_data() is None
        assert await api_client.save_site_data({"hero": {"heading": "Saved"}}) is True
        assert await api_client.fetch_site_data() == {"hero": {"heading": "Saved"}}

        await api_client.reset_site_data()
        assert await api_client.fetch_site_data() is None

    @pytest.mark.asyncio
    async def test_save_when_signed_out_sends_nothing(self, api_client):
        assert await api_client.save_site_data({"hero": {}}) is False
        assert await api_client.fetch_site_data() is None

    @pytest.mark.asyncio
    async def test_save_with_rejected_token_returns_false(self, api_client):
        api_client.credentials.set("forged", "admin")

        assert await api_client.save_site_data({"hero": {}}) is False
        assert not api_client.credentials.is_authenticated

    @pytest.mark.asyncio
    async def test_fetch_bypasses_caches(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"success": True, "data": None})

        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        async with SiteApiClient(TEST_API_URL, http_client=http) as api:
            await api.fetch_site_data()
        await http.aclose()

        assert "t" in seen[0].url.params
        assert seen[0].headers["Cache-Control"] == "no-cache"
        assert seen[0].headers["Pragma"] == "no-cache"

    @pytest.mark.asyncio
    async def test_edit_reaches_fresh_reader(self, api_client):
        """An admin edit saved by the store is what a new visitor loads"""
        await api_client.login(ADMIN_USERNAME, ADMIN_PASSWORD)
        store = SiteDataStore(api_client, debounce_seconds=0.05)
        await store.open()

        store.update_section("hero", {**store.data["hero"], "heading": "X"})
        await asyncio.sleep(0.3)
        await store.close()

        visitor = SiteDataStore(SiteApiClient(TEST_API_URL, http_client=api_client._http))
        await visitor.open()
        assert visitor.data["hero"]["heading"] == "X"
        assert visitor.data["hero"]["welcomeText"] == store.data["hero"]["welcomeText"]
        await visitor.close()


class TestUpload:
    @pytest.mark.asyncio
    async def test_upload_and_download(self, api_client):
        await api_client.login(ADMIN_USERNAME, ADMIN_PASSWORD)

        result = await api_client.upload_file("menu.webp", b"RIFF0000WEBP", "image/webp")

        assert result["url"].startswith("http://testserver/uploads/")
        downloaded = await api_client._http.get(result["url"])
        assert downloaded.content == b"RIFF0000WEBP"

    @pytest.mark.asyncio
    async def test_rejected_type(self, api_client):
        await api_client.login(ADMIN_USERNAME, ADMIN_PASSWORD)

        with pytest.raises(ApiError) as exc_info:
            await api_client.upload_file("notes.txt", b"text", "text/plain")

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Only images and videos are allowed"


class TestContactsAndInbox:
    @pytest.mark.asyncio
    async def test_contact_flow(self, api_client):
        first = await api_client.submit_contact("Ravi", "ravi@example.com", "123", "Birthday", people="40")
        await api_client.submit_contact("Meera", "meera@example.com", "456", "Office lunch")
        await api_client.login(ADMIN_USERNAME, ADMIN_PASSWORD)

        inbox = ContactInbox(api_client)
        assert await inbox.refresh() == 2

        updated = await api_client.update_contact_status(first["id"], "read")
        assert updated["status"] == "read"
        assert await inbox.refresh() == 1

        await api_client.delete_contact(first["id"])
        contacts = await api_client.list_contacts()
        assert [c["name"] for c in contacts] == ["Meera"]

    @pytest.mark.asyncio
    async def test_invalid_contact_is_rejected(self, api_client):
        with pytest.raises(ApiError) as exc_info:
            await api_client.submit_contact("", "a@example.com", "1", "hi")

        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_inbox_keeps_last_count_on_error(self, api_client):
        await api_client.submit_contact("Ravi", "ravi@example.com", "123", "Birthday")
        await api_client.login(ADMIN_USERNAME, ADMIN_PASSWORD)
        inbox = ContactInbox(api_client)
        assert await inbox.refresh() == 1

        api_client.credentials.set("forged", "admin")

        assert await inbox.refresh() == 1
        assert inbox.new_count == 1

    @pytest.mark.asyncio
    async def test_poll_refreshes_until_cancelled(self, api_client):
        await api_client.login(ADMIN_USERNAME, ADMIN_PASSWORD)
        inbox = ContactInbox(api_client)

        task = asyncio.create_task(inbox.poll(interval=0.05))
        await asyncio.sleep(0.02)
        await api_client.submit_contact("Late", "late@example.com", "1", "hello")
        await asyncio.sleep(0.2)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert inbox.new_count == 1


class TestSessionGuard:
    @pytest.mark.asyncio
    async def test_no_token(self, api_client):
        guard = SessionGuard(api_client)

        result = await guard.check()

        assert result is GuardResult.UNAUTHENTICATED
        assert guard.allows_access(result) is False

    @pytest.mark.asyncio
    async def test_valid_token(self, api_client):
        await api_client.login(ADMIN_USERNAME, ADMIN_PASSWORD)
        guard = SessionGuard(api_client)

        result = await guard.check()

        assert result is GuardResult.AUTHENTICATED
        assert guard.allows_access(result) is True

    @pytest.mark.asyncio
    async def test_invalid_token_is_cleared(self, api_client):
        api_client.credentials.set("forged", "admin")
        guard = SessionGuard(api_client)

        assert await guard.check() is GuardResult.UNAUTHENTICATED
        assert api_client.credentials.token is None

    @pytest.mark.asyncio
    async def test_unreachable_backend(self):
        api = unreachable_client()
        guard = SessionGuard(api)

        result = await guard.check()

        assert result is GuardResult.BACKEND_UNREACHABLE
        assert guard.error == "Cannot connect to backend."
        assert guard.allows_access(result) is False
        assert api.credentials.is_authenticated
        assert SessionGuard(api, allow_when_unreachable=True).allows_access(result) is True
        await api._http.aclose()

    @pytest.mark.asyncio
    async def test_non_json_verify_response(self):
        def proxy_page(request):
            return httpx.Response(200, text="<html>Bad gateway</html>")

        http = httpx.AsyncClient(transport=httpx.MockTransport(proxy_page))
        api = SiteApiClient(TEST_API_URL, credentials=Credentials("token", "admin"), http_client=http)
        guard = SessionGuard(api)

        result = await guard.check()

        assert result is GuardResult.BACKEND_UNREACHABLE
        assert guard.error == "Cannot connect to backend."
        assert api.credentials.is_authenticated
        await http.aclose()

    @pytest.mark.asyncio
    async def test_inbox_keeps_count_on_non_json_response(self):
        http = httpx.AsyncClient(
            transport=httpx.MockTransport(lambda request: httpx.Response(200, text="maintenance"))
        )
        api = SiteApiClient(TEST_API_URL, credentials=Credentials("token", "admin"), http_client=http)
        inbox = ContactInbox(api)
        inbox.new_count = 3

        assert await inbox.refresh() == 3
        await http.aclose()


class TestEndpoints:
    @pytest.mark.parametrize(
        "env_url,hostname,expected",
        [
            ("https://api.example.com/api/", "www.example.com", "https://api.example.com/api"),
            ("  ", "localhost", LOCAL_API_URL),
            (None, "127.0.0.1", LOCAL_API_URL),
            (None, "", LOCAL_API_URL),
            (None, "caterers.example.com", "https://caterers.example.com/api"),
        ],
    )
    def test_resolve_api_url(self, env_url, hostname, expected):
        assert resolve_api_url(env_url, hostname) == expected

    def test_endpoint_paths(self):
        endpoints = ApiEndpoints("https://x.example/api")

        assert endpoints.login == "https://x.example/api/login"
        assert endpoints.site_data_reset == "https://x.example/api/sitedata/reset"
        assert endpoints.contact_item(5) == "https://x.example/api/contacts/5"
