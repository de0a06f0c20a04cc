"""
Client-side holder of the site document.

Loads the document once, merges it onto the defaults, applies edits in
memory straight away and writes them back through a debounced writer task.
Only the latest unsaved snapshot is kept, so a burst of edits becomes a
single request.
"""
import asyncio
import contextlib
import copy
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional
import logging

from app.apps.sitedata.defaults import get_default_site_data
from app.apps.sitedata.utils.merge import merge_with_defaults

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 1.0

Listener = Callable[[Dict[str, Any]], None]


class StoreState(str, Enum):
    LOADING = "loading"
    READY = "ready"


class SiteDataStore:
    """
    Usage:
        store = SiteDataStore(api)
        await store.open()
        store.update_section("hero", {...})
        ...
        await store.close()

    `api` needs `fetch_site_data()`, `save_site_data(data)` and a
    `credentials` object with `is_authenticated`; `SiteApiClient` provides
    all three.
    """

    def __init__(self, api, defaults: Optional[Dict[str, Any]] = None,
                 debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS):
        self._api = api
        self._defaults = copy.deepcopy(defaults) if defaults is not None else get_default_site_data()
        self._data: Dict[str, Any] = copy.deepcopy(self._defaults)
        self.debounce_seconds = debounce_seconds
        self.state = StoreState.LOADING
        self.saving = False

        # Single pending-write slot, drained by the writer task
        self._pending: Optional[Dict[str, Any]] = None
        self._changed = asyncio.Event()
        self._save_lock = asyncio.Lock()
        self._writer: Optional[asyncio.Task] = None
        self._listeners: List[Listener] = []

    @property
    def data(self) -> Dict[str, Any]:
        """Current document. Edit it through the update methods so changes are saved."""
        return self._data

    @property
    def loading(self) -> bool:
        return self.state is StoreState.LOADING

    @property
    def has_pending_write(self) -> bool:
        return self._pending is not None

    async def open(self) -> None:
        try:
            stored = await self._api.fetch_site_data()
        except Exception as e:
            logger.error(f"Failed to load data from server: {e}")
            stored = None

        if stored is None:
            logger.info("No stored site data, using defaults")
        self._data = merge_with_defaults(self._defaults, stored)
        self.state = StoreState.READY
        self._writer = asyncio.create_task(self._write_loop())
        self._notify()

    async def close(self) -> None:
        """Write anything still pending, then stop the writer."""
        await self.flush()
        if self._writer is not None:
            self._writer.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._writer
            self._writer = None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call `listener(data)` after every change; returns an unsubscribe function."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def update_data(self, changes: Mapping[str, Any]) -> None:
        """Shallow-merge top-level fields."""
        self._data = {**self._data, **copy.deepcopy(dict(changes))}
        self._changed_locally()

    def update_section(self, section: str, value: Any) -> None:
        """Replace one section wholesale."""
        self._data = {**self._data, section: copy.deepcopy(value)}
        self._changed_locally()

    async def reset_to_defaults(self) -> bool:
        """Restore the defaults and store them right away. Signed out, only the local copy is reset."""
        self._data = copy.deepcopy(self._defaults)
        self._notify()
        async with self._save_lock:
            self._pending = None
            if not self._api.credentials.is_authenticated:
                logger.info("Not signed in, defaults restored locally only")
                return False
            return await self._save(copy.deepcopy(self._data))

    async def flush(self) -> bool:
        """Save the pending snapshot now instead of waiting for the debounce."""
        return await self._save_pending()

    def _changed_locally(self) -> None:
        self._notify()
        if self.state is not StoreState.READY:
            return
        if not self._api.credentials.is_authenticated:
            # Visitors get a read-only document
            return
        self._pending = copy.deepcopy(self._data)
        self._changed.set()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._data)
            except Exception:
                logger.exception("Site data listener failed")

    async def _write_loop(self) -> None:
        while True:
            await self._changed.wait()
            # Every new edit restarts the quiet period
            while True:
                self._changed.clear()
                try:
                    await asyncio.wait_for(self._changed.wait(), timeout=self.debounce_seconds)
                except asyncio.TimeoutError:
                    break
            await self._save_pending()

    async def _save_pending(self) -> bool:
        async with self._save_lock:
            if self._pending is None:
                return True
            snapshot, self._pending = self._pending, None
            return await self._save(snapshot)

    async def _save(self, snapshot: Dict[str, Any]) -> bool:
        self.saving = True
        try:
            success = await self._api.save_site_data(snapshot)
        except Exception as e:
            logger.error(f"Failed to save data to server: {e}")
            success = False
        finally:
            self.saving = False

        if success:
            logger.info("Data saved to server successfully")
        else:
            logger.error("Failed to save data to server")
        return success
