"""
List the media URLs referenced by the live site document and check that
they load.

    python scripts/check_media_urls.py --api https://example.com/api --limit 10
"""
import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Tuple

import httpx

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.client.api import SiteApiClient
from app.client.endpoints import LOCAL_API_URL
from app.apps.sitedata.utils.media_urls import collect_media_urls


async def probe(urls: List[str], timeout: float = 10.0) -> List[Tuple[str, str]]:
    """Return (url, outcome) for each URL; outcome is a status code or an error."""
    results = []
    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
        for url in urls:
            if not url.startswith(("http://", "https://")):
                results.append((url, "skipped (bundled asset)"))
                continue
            try:
                response = await client.head(url)
                if response.status_code == 405:
                    response = await client.get(url)
                results.append((url, str(response.status_code)))
            except httpx.HTTPError as e:
                results.append((url, f"error: {e}"))
    return results


async def check(api_url: str, limit: int) -> int:
    async with SiteApiClient(api_url) as api:
        document = await api.fetch_site_data()

    if document is None:
        print("No site data stored; the site is showing its defaults")
        return 0

    media = collect_media_urls(document)
    print(f"Found {len(media)} media reference(s)\n")
    for path, url in media:
        print(f"  {path}: {url}")

    print(f"\nChecking the first {min(limit, len(media))}...\n")
    broken = 0
    for url, outcome in await probe([url for _, url in media[:limit]]):
        ok = outcome == "200" or outcome.startswith("skipped")
        broken += 0 if ok else 1
        print(f"  {'OK  ' if ok else 'FAIL'} {url} ({outcome})")
    return broken


def main():
    parser = argparse.ArgumentParser(description="Check media URLs in the site document")
    parser.add_argument("--api", default=LOCAL_API_URL, help="API base URL (default: %(default)s)")
    parser.add_argument("--limit", type=int, default=5, help="how many URLs to probe")
    args = parser.parse_args()

    broken = asyncio.run(check(args.api, args.limit))
    sys.exit(1 if broken else 0)


if __name__ == "__main__":
    main()
