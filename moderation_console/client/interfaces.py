from __future__ import annotations

from typing import Protocol

from moderation_console.schemas import Credential, PostPage, PostUpdateRequest, ReviewStatusRequest


class LoginClient(Protocol):
    async def login(self, credential: Credential) -> str: ...


class PostListClient(Protocol):
    async def list_posts(self, token: str, page: int, page_size: int) -> PostPage: ...


class ReviewClient(Protocol):
    async def set_review_status(self, token: str, request: ReviewStatusRequest) -> None: ...

    async def update_post(self, token: str, request: PostUpdateRequest) -> None: ...
