"""
Tests for the client-side site data store and its debounced writer
"""
import asyncio
import logging
from unittest.mock import AsyncMock

import pytest

from app.client.api import Credentials
from app.client.store import SiteDataStore, StoreState

DEBOUNCE = 0.05
DEFAULTS = {
    "hero": {"heading": "Default heading", "description": "Default description"},
    "footer": {"copyright": "Default"},
}


class FakeApi:
    """Records saves instead of sending them"""

    def __init__(self, stored=None, authenticated=True):
        self.credentials = Credentials()
        if authenticated:
            self.credentials.set("token", "admin")
        self.fetch_site_data = AsyncMock(return_value=stored)
        self.save_site_data = AsyncMock(return_value=True)

    @property
    def saved(self):
        return [call.args[0] for call in self.save_site_data.await_args_list]


async def open_store(api, debounce=DEBOUNCE):
    store = SiteDataStore(api, defaults=DEFAULTS, debounce_seconds=debounce)
    await store.open()
    return store


async def settle(seconds=DEBOUNCE * 4):
    await asyncio.sleep(seconds)


class TestLoading:
    @pytest.mark.asyncio
    async def test_starts_loading_with_defaults(self):
        store = SiteDataStore(FakeApi(), defaults=DEFAULTS)

        assert store.loading is True
        assert store.data == DEFAULTS

    @pytest.mark.asyncio
    async def test_merges_stored_document(self):
        api = FakeApi(stored={"hero": {"heading": "Stored"}, "extra": [1]})

        store = await open_store(api)

        assert store.state is StoreState.READY
        assert store.data == {
            "hero": {"heading": "Stored", "description": "Default description"},
            "footer": {"copyright": "Default"},
            "extra": [1],
        }
        await store.close()

    @pytest.mark.asyncio
    async def test_nothing_stored_uses_defaults(self):
        store = await open_store(FakeApi(stored=None))

        assert store.data == DEFAULTS
        assert store.loading is False
        await store.close()

    @pytest.mark.asyncio
    async def test_fetch_failure_uses_defaults(self):
        api = FakeApi()
        api.fetch_site_data.side_effect = ConnectionError("backend down")

        store = await open_store(api)

        assert store.data == DEFAULTS
        assert store.state is StoreState.READY
        await store.close()

    @pytest.mark.asyncio
    async def test_loading_does_not_write(self):
        api = FakeApi(stored={"hero": {"heading": "Stored"}})

        store = await open_store(api)
        await settle()

        api.save_site_data.assert_not_awaited()
        await store.close()


class TestDebouncedWrites:
    @pytest.mark.asyncio
    async def test_rapid_edits_become_one_write_of_latest_state(self):
        api = FakeApi()
        store = await open_store(api)

        store.update_section("hero", {"heading": "First"})
        await asyncio.sleep(DEBOUNCE / 5)
        store.update_section("hero", {"heading": "Second"})
        store.update_data({"footer": {"copyright": "2026"}})

        assert store.data["hero"] == {"heading": "Second"}
        api.save_site_data.assert_not_awaited()

        await settle()

        assert api.saved == [{"hero": {"heading": "Second"}, "footer": {"copyright": "2026"}}]
        assert store.has_pending_write is False
        await store.close()

    @pytest.mark.asyncio
    async def test_edits_after_a_save_are_saved_again(self):
        api = FakeApi()
        store = await open_store(api)

        store.update_section("hero", {"heading": "One"})
        await settle()
        store.update_section("hero", {"heading": "Two"})
        await settle()

        assert [saved["hero"]["heading"] for saved in api.saved] == ["One", "Two"]
        await store.close()

    @pytest.mark.asyncio
    async def test_anonymous_edits_are_never_written(self):
        api = FakeApi(authenticated=False)
        store = await open_store(api)

        store.update_section("hero", {"heading": "Visitor"})
        await settle()
        await store.close()

        assert store.data["hero"] == {"heading": "Visitor"}
        api.save_site_data.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_edit_during_save_is_written_afterwards(self):
        api = FakeApi()
        release = asyncio.Event()

        async def slow_save(data):
            await release.wait()
            return True

        api.save_site_data.side_effect = slow_save
        store = await open_store(api)

        store.update_section("hero", {"heading": "A"})
        await settle()
        assert store.saving is True

        store.update_section("hero", {"heading": "B"})
        release.set()
        await settle()

        assert [saved["hero"]["heading"] for saved in api.saved] == ["A", "B"]
        assert store.saving is False
        await store.close()

    @pytest.mark.asyncio
    async def test_failed_save_keeps_local_state(self):
        api = FakeApi()
        api.save_site_data.return_value = False
        store = await open_store(api)

        store.update_section("hero", {"heading": "Kept"})
        await settle()

        assert store.data["hero"] == {"heading": "Kept"}
        assert api.save_site_data.await_count == 1
        await store.close()

    @pytest.mark.asyncio
    async def test_saved_snapshot_is_isolated_from_later_edits(self):
        api = FakeApi()
        store = await open_store(api)
        hero = {"heading": "Original"}

        store.update_section("hero", hero)
        hero["heading"] = "Mutated by caller"
        await settle()

        assert api.saved[0]["hero"] == {"heading": "Original"}
        await store.close()


class TestFlushAndReset:
    @pytest.mark.asyncio
    async def test_flush_saves_immediately(self):
        api = FakeApi()
        store = await open_store(api, debounce=10)

        store.update_section("hero", {"heading": "Now"})
        assert await store.flush() is True

        assert api.saved == [{**DEFAULTS, "hero": {"heading": "Now"}}]
        assert store.has_pending_write is False
        await store.close()

    @pytest.mark.asyncio
    async def test_close_writes_pending_edit(self):
        api = FakeApi()
        store = await open_store(api, debounce=10)

        store.update_section("hero", {"heading": "Last"})
        await store.close()

        assert api.saved[-1]["hero"] == {"heading": "Last"}

    @pytest.mark.asyncio
    async def test_reset_to_defaults_saves_defaults_and_drops_pending(self):
        api = FakeApi(stored={"hero": {"heading": "Stored"}})
        store = await open_store(api, debounce=10)
        store.update_section("hero", {"heading": "Unsaved"})

        assert await store.reset_to_defaults() is True

        assert store.data == DEFAULTS
        assert api.saved == [DEFAULTS]
        assert store.has_pending_write is False
        await store.close()
        assert api.save_site_data.await_count == 1

    @pytest.mark.asyncio
    async def test_reset_when_signed_out_stays_local(self, caplog):
        api = FakeApi(stored={"hero": {"heading": "Stored"}}, authenticated=False)
        store = await open_store(api)

        with caplog.at_level(logging.ERROR, logger="app.client.store"):
            assert await store.reset_to_defaults() is False

        assert store.data == DEFAULTS
        assert store.has_pending_write is False
        api.save_site_data.assert_not_awaited()
        assert caplog.records == []
        await store.close()


class TestSubscribe:
    @pytest.mark.asyncio
    async def test_listeners_see_every_change(self):
        store = await open_store(FakeApi())
        seen = []
        unsubscribe = store.subscribe(lambda data: seen.append(data["hero"]["heading"]))

        store.update_section("hero", {"heading": "One"})
        store.update_data({"hero": {"heading": "Two"}})
        unsubscribe()
        store.update_section("hero", {"heading": "Three"})

        assert seen == ["One", "Two"]
        await store.close()

    @pytest.mark.asyncio
    async def test_failing_listener_does_not_block_others(self):
        store = await open_store(FakeApi())
        seen = []

        def broken(data):
            raise RuntimeError("boom")

        store.subscribe(broken)
        store.subscribe(lambda data: seen.append(True))
        store.update_section("hero", {"heading": "X"})

        assert seen == [True]
        await store.close()
