"""
Upload helpers: type allow-list, unique names and size-limited writes
"""
from pathlib import Path
from typing import BinaryIO, Iterable, Optional
import os
import random
import time
import logging

from app.config import ALLOWED_UPLOAD_EXTENSIONS, MAX_UPLOAD_SIZE

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024

# MIME subtypes whose name differs from the file extension
MIME_SUBTYPE_ALIASES = {
    "quicktime": "mov",
}


class UploadTooLarge(Exception):
    """Raised when an upload exceeds the configured size limit."""


def file_extension(filename: Optional[str]) -> str:
    """Lower-cased extension including the dot, or '' if there is none."""
    return Path(filename or "").suffix.lower()


def is_allowed_file(filename: Optional[str], content_type: Optional[str],
                    allowed: Iterable[str] = ALLOWED_UPLOAD_EXTENSIONS) -> bool:
    """
    Both the extension and the MIME type must name an allowed media type.

        >>> is_allowed_file("dish.JPG", "image/jpeg")
        True
        >>> is_allowed_file("notes.txt", "image/png")
        False
    """
    allowed = set(allowed)
    extension = file_extension(filename).lstrip(".")
    if extension not in allowed:
        return False

    if not content_type or "/" not in content_type:
        return False
    media_type, subtype = content_type.split(";", 1)[0].strip().lower().split("/", 1)
    if media_type not in ("image", "video"):
        return False
    return MIME_SUBTYPE_ALIASES.get(subtype, subtype) in allowed


def generate_filename(original_filename: Optional[str]) -> str:
    """`<epoch millis>-<random 0..1e9><original extension>`"""
    millis = int(time.time() * 1000)
    suffix = random.randint(0, 10 ** 9)
    return f"{millis}-{suffix}{file_extension(original_filename)}"


def save_stream(source: BinaryIO, destination: Path, max_size: int = MAX_UPLOAD_SIZE) -> int:
    """
    Copy `source` to `destination`, refusing to write more than `max_size` bytes.

    Data goes to a `.part` file that is renamed on success and removed on any
    failure, so a rejected upload leaves nothing behind. Returns the size.
    """
    destination.parent.mkdir(parents=True, exist_ok=True)
    partial = destination.with_name(destination.name + ".part")
    written = 0
    try:
        with open(partial, "wb") as out:
            while True:
                chunk = source.read(CHUNK_SIZE)
                if not chunk:
                    break
                written += len(chunk)
                if written > max_size:
                    raise UploadTooLarge(f"File exceeds {max_size} bytes")
                out.write(chunk)
        os.replace(partial, destination)
    except BaseException:
        if partial.exists():
            partial.unlink()
        raise
    return written
