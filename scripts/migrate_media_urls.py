"""
Rewrite media URLs stored in the site document after a host change.

Uploads are stored with the absolute backend URL that was configured when
they were uploaded. When the deployment moves (e.g. from a platform
subdomain to a custom domain) run:

    python scripts/migrate_media_urls.py https://old-host.example https://new-host.example

Use --dry-run to see the changes without saving them.
"""
import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.config import SITE_DATA_KEY
from app.database import AsyncSessionLocal, close_db
from app.apps.sitedata.utils.documents import fetch_site_data, upsert_site_data
from app.apps.sitedata.utils.media_urls import count_occurrences, rewrite_url_prefix

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def migrate(old_url: str, new_url: str, dry_run: bool = False, data_key: str = SITE_DATA_KEY) -> int:
    """Returns the number of rewritten fields."""
    async with AsyncSessionLocal() as session:
        site_data = await fetch_site_data(session, data_key)
        if site_data is None:
            print(f"No site data found for key '{data_key}'")
            return 0

        found = count_occurrences(site_data.data, old_url)
        print(f"Found {found} occurrence(s) of {old_url}")
        if found == 0:
            print("No URLs need to be updated")
            return 0

        updated, changes = rewrite_url_prefix(site_data.data, old_url, new_url)
        for path, before, after in changes:
            print(f"  {path}: {before}")
            print(f"  {' ' * len(path)}  -> {after}")

        if dry_run:
            print(f"\nDry run: {len(changes)} field(s) would change")
            return len(changes)

        await upsert_site_data(session, updated, data_key)

        verify = await fetch_site_data(session, data_key)
        remaining = count_occurrences(verify.data, old_url)
        present = count_occurrences(verify.data, new_url)
        print(f"\nOld URLs remaining: {remaining}")
        print(f"New URLs found: {present}")
        if remaining:
            logger.warning("Some URLs were not updated, check the document manually")
        return len(changes)


def main():
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("old_url", help="URL prefix currently stored, e.g. https://old-host.example")
    parser.add_argument("new_url", help="replacement prefix, e.g. https://new-host.example")
    parser.add_argument("--dry-run", action="store_true", help="print changes without saving")
    parser.add_argument("--key", default=SITE_DATA_KEY, help="site data key (default: %(default)s)")
    args = parser.parse_args()

    async def run():
        try:
            await migrate(args.old_url.rstrip("/"), args.new_url.rstrip("/"), args.dry_run, args.key)
        finally:
            await close_db()

    asyncio.run(run())


if __name__ == "__main__":
    main()
