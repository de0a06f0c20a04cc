"""
Helpers for finding and rewriting media references inside a site document.

Upload URLs are absolute and carry the backend host that was configured at
upload time, so moving a deployment to a new host leaves stale URLs behind.
These helpers walk the document and fix them up; the scripts in
`scripts/` drive them against the database.
"""
import copy
import re
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from app.apps.sitedata.defaults import ASSET_PREFIX

MEDIA_EXTENSIONS = ("jpeg", "jpg", "png", "gif", "webp", "svg", "mp4", "webm", "mov")
_MEDIA_RE = re.compile(r"\.(%s)(\?.*)?$" % "|".join(MEDIA_EXTENSIONS), re.IGNORECASE)

Change = Tuple[str, str, str]


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def iter_strings(document: Any, path: str = "") -> Iterator[Tuple[str, str]]:
    """Yield (path, value) for every string leaf, e.g. ``services.items[0].image``."""
    if isinstance(document, str):
        yield path, document
    elif isinstance(document, Mapping):
        for key, value in document.items():
            yield from iter_strings(value, _join(path, str(key)))
    elif isinstance(document, list):
        for index, value in enumerate(document):
            yield from iter_strings(value, f"{path}[{index}]")


def is_media_reference(value: str) -> bool:
    if "/uploads/" in value or value.startswith(ASSET_PREFIX):
        return True
    return bool(_MEDIA_RE.search(value))


def collect_media_urls(document: Any, base_url: Optional[str] = None) -> List[Tuple[str, str]]:
    """
    List the media references in a document as (path, url) pairs.

    With `base_url`, only references starting with it are returned.
    """
    found = []
    for path, value in iter_strings(document):
        if not is_media_reference(value):
            continue
        if base_url and not value.startswith(base_url):
            continue
        found.append((path, value))
    return found


def count_occurrences(document: Any, needle: str) -> int:
    return sum(value.count(needle) for _, value in iter_strings(document))


def _rewrite(document: Any, path: str, rewrite, changes: List[Change]) -> Any:
    if isinstance(document, str):
        updated = rewrite(document)
        if updated != document:
            changes.append((path, document, updated))
        return updated
    if isinstance(document, Mapping):
        return {
            key: _rewrite(value, _join(path, str(key)), rewrite, changes)
            for key, value in document.items()
        }
    if isinstance(document, list):
        return [
            _rewrite(value, f"{path}[{index}]", rewrite, changes)
            for index, value in enumerate(document)
        ]
    return copy.deepcopy(document)


def rewrite_url_prefix(document: Any, old: str, new: str) -> Tuple[Any, List[Change]]:
    """
    Replace `old` with `new` in every string leaf that contains it.

    Only the first occurrence within each string is replaced. Returns the
    rewritten copy and the list of (path, before, after) changes.
    """
    if not old:
        raise ValueError("old URL must not be empty")

    changes: List[Change] = []
    updated = _rewrite(document, "", lambda value: value.replace(old, new, 1), changes)
    return updated, changes


def replace_asset_paths(document: Any, mapping: Dict[str, str]) -> Tuple[Any, List[Change]]:
    """
    Point bundled asset paths at uploaded copies.

    `mapping` goes from asset file name (``hero-bg.jpg``) to its uploaded
    URL. Asset paths with no entry are left as they are.
    """
    def rewrite(value: str) -> str:
        if not value.startswith(ASSET_PREFIX):
            return value
        filename = value.rsplit("/", 1)[-1]
        return mapping.get(filename, value)

    changes: List[Change] = []
    updated = _rewrite(document, "", rewrite, changes)
    return updated, changes
