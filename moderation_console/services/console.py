from __future__ import annotations

import random
from typing import Optional

import structlog

from moderation_console.client import AdminApiClient
from moderation_console.config import Settings
from moderation_console.enums import AuthPhase, ListPhase, NavigationTarget, ReviewDecision
from moderation_console.errors import AuthenticationFailed
from moderation_console.schemas import ConsoleSnapshot, PageSnapshot, Post
from moderation_console.services.authenticator import SessionAuthenticator
from moderation_console.services.item_review import ItemReviewController
from moderation_console.services.review_list import ReviewListController

logger = structlog.get_logger(__name__)


class ReviewConsole:
    """One reviewer session: login, the page being browsed, and its items."""

    def __init__(self, settings: Settings, client: AdminApiClient, rng: Optional[random.Random] = None) -> None:
        self.settings = settings
        self.client = client
        self.rng = rng
        self.authenticator = SessionAuthenticator(client, settings.credentials, rng=rng)
        self.review_list: Optional[ReviewListController] = None
        self.items: dict[str, ItemReviewController] = {}

    @property
    def username(self) -> Optional[str]:
        return self.authenticator.username

    async def start(self) -> None:
        """Authenticate and load the first page. Safe to call repeatedly."""
        try:
            session = await self.authenticator.authenticate()
        except AuthenticationFailed:
            return

        if self.review_list is None:
            self.review_list = ReviewListController(
                self.client,
                session.token,
                page_size=self.settings.page_size,
                mode=self.settings.browse_mode,
                rng=self.rng,
                on_page_applied=self._rebuild_items,
            )
            self.review_list.request_page(1)
        await self.review_list.wait()

    def _rebuild_items(self, posts: list[Post]) -> None:
        token = self.authenticator.session.token
        self.items = {post.id: ItemReviewController(self.client, token, post) for post in posts}

    async def navigate(self, target: str) -> None:
        if self.review_list is None:
            return
        if target == NavigationTarget.PREVIOUS.value:
            self.review_list.previous_page()
        elif target == NavigationTarget.NEXT.value:
            self.review_list.next_page()
        elif target == NavigationTarget.LAST.value:
            self.review_list.last_page()
        else:
            self.review_list.request_page(int(target))
        await self.review_list.wait()

    def visible_items(self) -> list[ItemReviewController]:
        # Items only exist while a settled page is on screen.
        if self.review_list is None or self.review_list.phase is not ListPhase.READY:
            return []
        return list(self.items.values())

    def item(self, post_id: str) -> Optional[ItemReviewController]:
        if self.review_list is None or self.review_list.phase is not ListPhase.READY:
            return None
        return self.items.get(post_id)

    async def submit(self, post_id: str, decision: ReviewDecision) -> bool:
        controller = self.item(post_id)
        if controller is None:
            raise KeyError(post_id)
        return await controller.submit(decision)

    def snapshot(self) -> ConsoleSnapshot:
        auth = self.authenticator
        if self.review_list is not None:
            page = self.review_list.snapshot()
            list_phase = self.review_list.phase
            list_error = str(self.review_list.error) if self.review_list.error else None
        else:
            page = PageSnapshot(
                current_page=1,
                page_size=self.settings.page_size,
                total_items=0,
                total_pages=0,
                can_go_previous=False,
                can_go_next=False,
                browse_mode=self.settings.browse_mode,
            )
            list_phase = ListPhase.IDLE
            list_error = None

        return ConsoleSnapshot(
            auth_phase=auth.phase,
            username=auth.username,
            auth_error=str(auth.error) if auth.phase is AuthPhase.FAILED else None,
            list_phase=list_phase,
            list_error=list_error,
            page=page,
            items=[controller.snapshot() for controller in self.visible_items()],
        )
