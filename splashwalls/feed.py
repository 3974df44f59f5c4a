"""Photo feed - fetching the remote list and choosing what to show."""

from __future__ import annotations
from typing import Any, Iterable, List, Optional

import requests

from .config import FEED_URL, HTTP_TIMEOUT_S, NUM_WALLPAPERS, PHOTO_URL_TEMPLATE
from .errors import FeedError
from .logging import log
from .sampling import unique_random_numbers
from .types import PhotoDescriptor


def parse_feed(payload: Any) -> List[PhotoDescriptor]:
    """Build descriptors from the decoded /list JSON.

    Entries without a usable id, width or height are skipped.
    """
    if not isinstance(payload, list):
        raise FeedError(f"expected a JSON list, got {type(payload).__name__}")

    photos: List[PhotoDescriptor] = []
    skipped = 0
    for entry in payload:
        try:
            photos.append(PhotoDescriptor(
                id=int(entry["id"]),
                width=int(entry["width"]),
                height=int(entry["height"]),
                author=str(entry.get("author", "")),
                filename=str(entry.get("filename", "")),
                author_url=str(entry.get("author_url", "")),
                post_url=str(entry.get("post_url", "")),
            ))
        except (KeyError, TypeError, ValueError, AttributeError):
            skipped += 1

    if skipped:
        log(f"[FEED] Skipped {skipped} malformed entries")
    return photos


def fetch_feed(session: Optional[requests.Session] = None,
               url: str = FEED_URL,
               timeout: float = HTTP_TIMEOUT_S) -> List[PhotoDescriptor]:
    """Download and parse the photo list."""
    http = session if session is not None else requests
    try:
        response = http.get(url, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as e:
        raise FeedError(f"request to {url} failed: {e}") from e
    except ValueError as e:
        raise FeedError(f"invalid JSON from {url}: {e}") from e

    photos = parse_feed(payload)
    log(f"[FEED] Fetched {len(photos)} photos from {url}")
    return photos


def photo_url(photo: PhotoDescriptor) -> str:
    """URL of the full-size image for a descriptor."""
    return PHOTO_URL_TEMPLATE.format(width=photo.width, height=photo.height, id=photo.id)


def pick_wallpapers(photos: Iterable[PhotoDescriptor], count: int = NUM_WALLPAPERS,
                    rng: Optional[Any] = None) -> List[PhotoDescriptor]:
    """Choose ``count`` distinct photos at random, in draw order."""
    pool = list(photos)
    indices = unique_random_numbers(count, 0, len(pool), rng=rng)
    return [pool[i] for i in indices]
