from __future__ import annotations

from typing import Optional

import httpx
import structlog
from pydantic import ValidationError

from moderation_console.config import Settings, get_settings
from moderation_console.errors import AuthenticationFailed, ItemReviewFailed, ListFetchFailed
from moderation_console.schemas import (
    Credential,
    LoginResponse,
    PostPage,
    PostUpdateRequest,
    ReviewStatusRequest,
)

logger = structlog.get_logger(__name__)

LOGIN_PATH = "/user/login"
POSTS_PATH = "/post"
REVIEW_PATH = "/post/review"

# Pending-review queue filter. Opaque server codes, passed through as-is.
PENDING_QUEUE_FILTER = {
    "protectionLv": 2,
    "dateRangeType": 1,
    "reviewStatus": 1,
}


def _error_body(exc: httpx.HTTPStatusError) -> str:
    return exc.response.text[:600] if exc.response is not None else ""


class AdminApiClient:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._http = httpx.AsyncClient(
            base_url=self.settings.api_base_url.rstrip("/"),
            timeout=self.settings.api_timeout_seconds,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    def _auth_headers(self, token: str) -> dict:
        return {self.settings.api_auth_header: f"Bearer {token}"}

    async def login(self, credential: Credential) -> str:
        try:
            response = await self._http.post(LOGIN_PATH, json=credential.model_dump(by_alias=True))
            response.raise_for_status()
            payload = LoginResponse.model_validate(response.json())
        except httpx.HTTPStatusError as exc:
            logger.error(
                "admin_login_http_error",
                username=credential.username,
                status_code=exc.response.status_code if exc.response is not None else None,
                body=_error_body(exc),
            )
            raise AuthenticationFailed("Login failed") from exc
        except (httpx.HTTPError, ValueError, ValidationError) as exc:
            logger.error("admin_login_failed", username=credential.username, error=str(exc))
            raise AuthenticationFailed(str(exc)) from exc

        if not payload.access_token:
            logger.error("admin_login_missing_token", username=credential.username)
            raise AuthenticationFailed("No access token received")
        return payload.access_token

    async def list_posts(self, token: str, page: int, page_size: int) -> PostPage:
        params = {**PENDING_QUEUE_FILTER, "current": page, "pageSize": page_size}
        try:
            response = await self._http.get(POSTS_PATH, params=params, headers=self._auth_headers(token))
            response.raise_for_status()
            return PostPage.model_validate(response.json())
        except httpx.HTTPStatusError as exc:
            logger.error(
                "admin_list_posts_http_error",
                page=page,
                status_code=exc.response.status_code if exc.response is not None else None,
                body=_error_body(exc),
            )
            raise ListFetchFailed("Failed to fetch videos") from exc
        except (httpx.HTTPError, ValueError, ValidationError) as exc:
            logger.error("admin_list_posts_failed", page=page, error=str(exc))
            raise ListFetchFailed(str(exc)) from exc

    async def set_review_status(self, token: str, request: ReviewStatusRequest) -> None:
        await self._put(REVIEW_PATH, token, request.model_dump(by_alias=True), post_ids=request.post_ids)

    async def update_post(self, token: str, request: PostUpdateRequest) -> None:
        await self._put(POSTS_PATH, token, request.model_dump(by_alias=True), post_ids=[request.post_id])

    async def _put(self, path: str, token: str, body: dict, post_ids: list[str]) -> None:
        try:
            response = await self._http.put(path, json=body, headers=self._auth_headers(token))
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "admin_put_http_error",
                path=path,
                post_ids=post_ids,
                status_code=exc.response.status_code if exc.response is not None else None,
                body=_error_body(exc),
            )
            raise ItemReviewFailed(f"{path} returned {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            logger.error("admin_put_failed", path=path, post_ids=post_ids, error=str(exc))
            raise ItemReviewFailed(str(exc)) from exc
