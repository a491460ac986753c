"""Shared fixtures: in-memory images, fake HTTP session, recording listeners."""

import io
import json

import pytest
import requests
from PIL import Image

from decksheet.client import KeyforgeClient
from decksheet.config import Settings

CARD_SIZE = (300, 420)
DECK_ID = "1a2b3c4d-1a2b-3c4d-1a2b-3c4d5e6f7a8b"
DECK_URL = f"https://decks.test/api/decks/{DECK_ID}/?links=cards"


def _color_for(key: str) -> tuple[int, int, int]:
    h = sum(key.encode()) * 2654435761
    return (h % 200 + 40, (h >> 8) % 200 + 40, (h >> 16) % 200 + 40)


class FakeFetcher:
    """Returns a solid-color card per URL and records each call."""

    def __init__(self, size=CARD_SIZE, sizes=None):
        self.size = size
        self.sizes = sizes or {}
        self.calls: list[str] = []

    def fetch(self, url):
        self.calls.append(url)
        return Image.new("RGB", self.sizes.get(url, self.size), _color_for(url))


class RecordingListener:
    def __init__(self):
        self.records = []

    def notify(self, progress):
        self.records.append(progress)

    @property
    def messages(self):
        return [p.message for p in self.records]


def _response(url: str, status: int, body: bytes) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.url = url
    response.reason = "OK" if status < 400 else "Error"
    response._content = body
    return response


class FakeSession:
    """Stands in for requests.Session; serves canned bodies by URL."""

    def __init__(self, routes=None):
        self.routes: dict[str, object] = dict(routes or {})
        self.headers: dict[str, str] = {}
        self.requests: list[str] = []
        self.closed = False

    def get(self, url, timeout=None):
        self.requests.append(url)
        route = self.routes.get(url)
        if route is None:
            return _response(url, 404, b"not found")
        if isinstance(route, Exception):
            raise route
        return _response(url, 200, route)

    def close(self):
        self.closed = True


def png_bytes(size=CARD_SIZE, color=(255, 0, 0), fmt="PNG") -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", size, color).save(buf, fmt)
    return buf.getvalue()


def deck_json(card_ids, cards, name="Test Deck") -> bytes:
    """Deck payload in the shape the deck API returns."""
    payload = {
        "data": {"id": DECK_ID, "name": name, "_links": {"cards": list(card_ids)}},
        "_linked": {"cards": [{"id": cid, "front_image": url} for cid, url in cards.items()]},
    }
    return json.dumps(payload).encode("utf-8")


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def recorder():
    return RecordingListener()


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def settings():
    return Settings(deck_url="https://decks.test/api/decks/{id}/?links=cards", timeout=5.0)


@pytest.fixture
def client(settings, session):
    return KeyforgeClient(settings, session=session)


@pytest.fixture
def make_deck(session):
    """Register a deck and its card images on the fake session.

    Takes card names in deck order; each distinct name gets its own image URL.
    Returns the list of image URLs in deck order.
    """

    def _make(names, size=CARD_SIZE):
        cards = {}
        for name in names:
            url = f"https://images.test/{name}.png"
            cards[name] = url
            session.routes[url] = png_bytes(size, _color_for(name))
        session.routes[DECK_URL] = deck_json(names, cards)
        return [cards[name] for name in names]

    return _make
