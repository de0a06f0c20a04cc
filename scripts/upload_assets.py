"""
Upload the bundled site images and point the stored document at them.

The default document references images shipped with the frontend
(`/assets/hero-bg.jpg`, ...). This uploads those files through the API and
rewrites the matching asset paths in the stored document to the returned
upload URLs.

    python scripts/upload_assets.py ../frontend/src/assets --api http://localhost:5000/api
"""
import argparse
import asyncio
import mimetypes
import os
import sys
from pathlib import Path
from typing import Dict, Iterable

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.client.api import ApiError, SiteApiClient
from app.client.endpoints import LOCAL_API_URL
from app.apps.sitedata.defaults import ASSET_PREFIX, get_default_site_data
from app.apps.sitedata.utils.media_urls import collect_media_urls, replace_asset_paths
from app.apps.sitedata.utils.merge import merge_with_defaults


def referenced_assets(document) -> list:
    """File names of the bundled assets a document refers to, in order of first use."""
    names = []
    for _, value in collect_media_urls(document):
        if value.startswith(ASSET_PREFIX):
            name = value.rsplit("/", 1)[-1]
            if name not in names:
                names.append(name)
    return names


async def upload_assets(api: SiteApiClient, assets_dir: Path, names: Iterable[str]) -> Dict[str, str]:
    """Upload each named file found in `assets_dir`; returns name -> URL."""
    uploaded = {}
    for name in names:
        path = assets_dir / name
        if not path.is_file():
            print(f"  missing: {name}")
            continue
        content_type = mimetypes.guess_type(name)[0] or "application/octet-stream"
        try:
            result = await api.upload_file(name, path.read_bytes(), content_type)
        except ApiError as e:
            print(f"  failed:  {name} ({e.message})")
            continue
        uploaded[name] = result["url"]
        print(f"  uploaded: {name} -> {result['url']}")
    return uploaded


async def publish(api: SiteApiClient, assets_dir: Path) -> int:
    """
    Upload the referenced assets and save the rewritten document.
    Returns the number of rewritten fields.
    """
    stored = await api.fetch_site_data()
    document = merge_with_defaults(get_default_site_data(), stored)

    names = referenced_assets(document)
    print(f"Document references {len(names)} bundled asset(s)")
    uploaded = await upload_assets(api, assets_dir, names)
    if not uploaded:
        print("Nothing uploaded, document left unchanged")
        return 0

    updated, changes = replace_asset_paths(document, uploaded)
    for path, before, after in changes:
        print(f"  {path}: {before} -> {after}")

    if not await api.save_site_data(updated):
        raise RuntimeError("Saving the updated site data failed")
    print(f"\nSaved {len(changes)} updated field(s)")
    return len(changes)


async def run(api_url: str, assets_dir: Path, username: str, password: str) -> int:
    async with SiteApiClient(api_url) as api:
        await api.login(username, password)
        return await publish(api, assets_dir)


def main():
    parser = argparse.ArgumentParser(description="Upload bundled site images and update the document")
    parser.add_argument("assets_dir", type=Path, help="directory holding hero-bg.jpg, gallery-1.jpg, ...")
    parser.add_argument("--api", default=LOCAL_API_URL, help="API base URL (default: %(default)s)")
    parser.add_argument("--username", default=os.getenv("ADMIN_USERNAME", "admin"))
    parser.add_argument("--password", default=os.getenv("ADMIN_PASSWORD", "admin123"))
    args = parser.parse_args()

    asyncio.run(run(args.api, args.assets_dir, args.username, args.password))


if __name__ == "__main__":
    main()
