import random

import pytest
import requests

from splashwalls.errors import FeedError, InvalidSampleRequest
from splashwalls.feed import fetch_feed, parse_feed, photo_url, pick_wallpapers
from splashwalls.types import PhotoDescriptor

LIST_PAYLOAD = [
    {"format": "jpeg", "width": 5616, "height": 3744, "filename": "0000_yC-Yzbqy7PY.jpeg",
     "id": 0, "author": "Alejandro Escamilla",
     "author_url": "https://unsplash.com/@alejandroescamilla",
     "post_url": "https://unsplash.com/photos/yC-Yzbqy7PY"},
    {"format": "jpeg", "width": 5616, "height": 3744, "filename": "0001_LNRyGwIJr5c.jpeg",
     "id": 1, "author": "Alejandro Escamilla"},
    {"width": 100, "height": 100, "author": "no id"},
    {"id": "x", "width": 100, "height": 100},
    "garbage",
]


class FakeResponse:
    def __init__(self, payload=None, status: int = 200, content: bytes = b""):
        self.payload = payload
        self.status_code = status
        self.content = content

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.urls = []

    def get(self, url, timeout=None):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.response


def make_photos(n: int) -> list:
    return [PhotoDescriptor(id=i, width=800, height=600, author=f"author {i}") for i in range(n)]


def test_parse_feed_keeps_well_formed_entries() -> None:
    photos = parse_feed(LIST_PAYLOAD)

    assert [p.id for p in photos] == [0, 1]
    assert photos[0].author == "Alejandro Escamilla"
    assert photos[0].post_url.endswith("yC-Yzbqy7PY")
    assert photos[1].author_url == ""


def test_parse_feed_rejects_non_list() -> None:
    with pytest.raises(FeedError):
        parse_feed({"photos": []})


def test_photo_url() -> None:
    photo = PhotoDescriptor(id=42, width=1920, height=1080)

    assert photo_url(photo) == "https://unsplash.it/1920/1080?image=42"


def test_pick_wallpapers_returns_distinct_subset() -> None:
    photos = make_photos(30)

    picked = pick_wallpapers(photos, 10, rng=random.Random(5))

    assert len(picked) == 10
    assert len({p.id for p in picked}) == 10
    assert all(p in photos for p in picked)


def test_pick_wallpapers_fails_fast_on_short_feed() -> None:
    with pytest.raises(InvalidSampleRequest):
        pick_wallpapers(make_photos(3), 10)


def test_fetch_feed_parses_response() -> None:
    session = FakeSession(FakeResponse(LIST_PAYLOAD))

    photos = fetch_feed(session=session, url="https://example.test/list")

    assert session.urls == ["https://example.test/list"]
    assert len(photos) == 2


@pytest.mark.parametrize("session", [
    FakeSession(error=requests.ConnectionError("offline")),
    FakeSession(FakeResponse(LIST_PAYLOAD, status=503)),
    FakeSession(FakeResponse(ValueError("Expecting value"))),
])
def test_fetch_feed_wraps_transport_errors(session) -> None:
    with pytest.raises(FeedError):
        fetch_feed(session=session)
