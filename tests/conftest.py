from __future__ import annotations

import asyncio

import httpx
import pytest

from moderation_console.config import Settings
from moderation_console.schemas import Credential

API_BASE = "http://admin.test/admin-api/v1"


def make_post(post_id: str, preview_url: str = "https://cdn.test/v/imageSprite01.jpg", **overrides) -> dict:
    payload = {
        "id": post_id,
        "creatorID": f"creator-{post_id}",
        "content": f"caption {post_id}",
        "coverUrl": f"https://cdn.test/cover/{post_id}.jpg",
        "webVttUrl": preview_url,
    }
    payload.update(overrides)
    return payload


class FakeAdminApi:
    """In-memory stand-in for the admin API, served through httpx.MockTransport."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.login_status = 200
        self.login_body: dict = {"accessToken": "token-abc"}
        self.list_status = 200
        self.pages: dict[int, dict] = {}
        self.page_gates: dict[int, asyncio.Event] = {}
        self.review_status = 200
        self.update_status = 200

    def set_page(self, page: int, posts: list[dict], total: int) -> None:
        self.pages[page] = {"data": posts, "pageResult": {"total": total}}

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == f"/admin-api/v1{path}"]

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/admin-api/v1")

        if request.method == "POST" and path == "/user/login":
            return httpx.Response(self.login_status, json=self.login_body)
        if request.method == "GET" and path == "/post":
            page = int(request.url.params["current"])
            gate = self.page_gates.get(page)
            if gate is not None:
                await gate.wait()
            body = self.pages.get(page, {"data": [], "pageResult": {"total": 0}})
            return httpx.Response(self.list_status, json=body)
        if request.method == "PUT" and path == "/post/review":
            return httpx.Response(self.review_status, json={})
        if request.method == "PUT" and path == "/post":
            return httpx.Response(self.update_status, json={})
        return httpx.Response(404, json={"message": "not found"})

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        api_base_url=API_BASE,
        credentials=(
            Credential(username="alice", password="pw-a", code_2fa="222"),
            Credential(username="bob", password="pw-b", code_2fa="222"),
        ),
    )


@pytest.fixture
def fake_api() -> FakeAdminApi:
    return FakeAdminApi()
