"""Pytest fixtures shared across the test suite."""

import json

import httpx
import pytest

USER_ID = "48628349957132247"
TOKEN = "test-token"


class FakeGOG:
    """In-memory GOG API served through httpx.MockTransport."""

    def __init__(self):
        self.routes: dict[str, object] = {}
        self.requests: list[httpx.Request] = []

    def add(self, url: str, response):
        """Register a response (httpx.Response, JSON-able object, or exception)."""
        self.routes[url] = response

    def owned(self, ids):
        self.add("https://embed.gog.com/user/data/games", {"owned": ids})

    def details(self, game_id, title):
        self.add(f"https://embed.gog.com/account/gameDetails/{game_id}.json", {"title": title})

    def achievements(self, game_id, items, user_id=USER_ID):
        self.add(
            f"https://gameplay.gog.com/clients/{game_id}/users/{user_id}/achievements",
            {"total_count": len(items), "items": items},
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)
        if url not in self.routes:
            return httpx.Response(404, json={"error": "not_found"})
        response = self.routes[url]
        if isinstance(response, Exception):
            raise response
        if isinstance(response, httpx.Response):
            return response
        return httpx.Response(200, content=json.dumps(response).encode("utf-8"))

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


def achievement_item(key, name, *, visible=True, date_unlocked=None):
    return {
        "achievement_id": "5" + key[-4:],
        "achievement_key": key,
        "visible": visible,
        "name": name,
        "description": f"{name} description",
        "image_url_unlocked": f"https://images.gog.com/{key}.png",
        "image_url_locked": f"https://images.gog.com/{key}_locked.png",
        "date_unlocked": date_unlocked,
        "rarity": 12.5,
    }


@pytest.fixture
def fake_gog():
    """Fake GOG API with no routes registered."""
    return FakeGOG()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's GOG_* settings out of the tests."""
    for name in ("GOG_USER_ID", "GOG_ACCESS_TOKEN", "GOG_EXPORT_DIR"):
        monkeypatch.delenv(name, raising=False)
