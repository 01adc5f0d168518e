from __future__ import annotations

import asyncio
import math
import random
from dataclasses import dataclass
from typing import Callable, Optional

import structlog

from moderation_console.client import PostListClient
from moderation_console.enums import BrowseMode, ListPhase
from moderation_console.errors import ListFetchFailed
from moderation_console.schemas import PageSnapshot, Post
from moderation_console.services.media import visible_posts

logger = structlog.get_logger(__name__)

DEFAULT_PAGE_SIZE = 20


@dataclass
class PageState:
    current_page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    total_items: int = 0

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.page_size)

    @property
    def last_page(self) -> int:
        return max(self.total_pages, 1)

    @property
    def can_go_previous(self) -> bool:
        return self.current_page > 1

    @property
    def can_go_next(self) -> bool:
        return self.current_page < self.total_pages


class ReviewListController:
    """Fetches the pending-review queue one page at a time.

    Every page change starts a new fetch task and cancels the one in flight.
    Each task carries the generation it was started under, and only the task
    matching the current generation may apply its result, so a late response
    for an old page can never replace the list for a newer one.

    In ``BrowseMode.RANDOM_SAMPLE`` a successful fetch is followed by exactly
    one extra fetch for a page drawn uniformly from the pages that exist.
    """

    def __init__(
        self,
        client: PostListClient,
        token: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        mode: BrowseMode = BrowseMode.SEQUENTIAL,
        rng: Optional[random.Random] = None,
        on_page_applied: Optional[Callable[[list[Post]], None]] = None,
    ) -> None:
        self.client = client
        self.token = token
        self.mode = mode
        self.rng = rng
        self.on_page_applied = on_page_applied
        self.page = PageState(page_size=page_size)
        self.phase = ListPhase.IDLE
        self.posts: list[Post] = []
        self.error: Optional[ListFetchFailed] = None
        self._generation = 0
        self._has_loaded = False
        self._task: Optional[asyncio.Task] = None

    @property
    def visible_posts(self) -> list[Post]:
        return visible_posts(self.posts)

    @property
    def is_loading(self) -> bool:
        return self.phase is ListPhase.LOADING

    def snapshot(self) -> PageSnapshot:
        return PageSnapshot(
            current_page=self.page.current_page,
            page_size=self.page.page_size,
            total_items=self.page.total_items,
            total_pages=self.page.total_pages,
            can_go_previous=self.page.can_go_previous,
            can_go_next=self.page.can_go_next,
            browse_mode=self.mode,
        )

    def _clamp(self, page: int) -> int:
        page = max(page, 1)
        if self._has_loaded:
            page = min(page, self.page.last_page)
        return page

    def request_page(self, page: int) -> asyncio.Task:
        target = self._clamp(page)
        if self._task is not None and not self._task.done():
            logger.info(
                "review_page_fetch_superseded",
                previous_page=self.page.current_page,
                next_page=target,
            )
            self._task.cancel()

        self._generation += 1
        self.page.current_page = target
        self.phase = ListPhase.LOADING
        self.error = None
        self._task = asyncio.get_running_loop().create_task(
            self._fetch(target, self._generation, allow_jump=True)
        )
        return self._task

    async def go_to_page(self, page: int) -> None:
        self.request_page(page)
        await self.wait()

    def previous_page(self) -> Optional[asyncio.Task]:
        if not self.page.can_go_previous:
            return None
        return self.request_page(self.page.current_page - 1)

    def next_page(self) -> Optional[asyncio.Task]:
        if not self.page.can_go_next:
            return None
        return self.request_page(self.page.current_page + 1)

    def last_page(self) -> Optional[asyncio.Task]:
        last = self.page.last_page
        if self.page.current_page == last:
            return None
        return self.request_page(last)

    async def wait(self) -> None:
        """Wait until no fetch is in flight, following any supersessions."""
        while self._task is not None and not self._task.done():
            task = self._task
            try:
                await asyncio.shield(task)
            except asyncio.CancelledError:
                if not task.cancelled():
                    raise

    async def _fetch(self, page: int, generation: int, allow_jump: bool) -> None:
        try:
            result = await self.client.list_posts(self.token, page, self.page.page_size)
        except ListFetchFailed as exc:
            if generation != self._generation:
                return
            self.phase = ListPhase.FAILED
            self.error = exc
            self.posts = []
            logger.error("review_page_fetch_failed", page=page, error=str(exc))
            return

        if generation != self._generation:
            logger.info("review_page_response_dropped", page=page)
            return

        self.posts = list(result.items)
        self.page.total_items = result.total
        self._has_loaded = True
        self.phase = ListPhase.READY
        logger.info(
            "review_page_loaded",
            page=page,
            items=len(self.posts),
            visible=len(self.visible_posts),
            total=result.total,
        )
        if self.on_page_applied is not None:
            self.on_page_applied(self.visible_posts)

        if allow_jump and self.mode is BrowseMode.RANDOM_SAMPLE:
            await self._jump_to_random_page(page)

    async def _jump_to_random_page(self, fetched_page: int) -> None:
        total_pages = self.page.total_pages
        if total_pages < 1:
            return
        chooser = self.rng or random
        target = chooser.randint(1, total_pages)
        if target == fetched_page:
            return

        logger.info("review_page_random_jump", from_page=fetched_page, to_page=target, total_pages=total_pages)
        self._generation += 1
        self.page.current_page = target
        self.phase = ListPhase.LOADING
        await self._fetch(target, self._generation, allow_jump=False)
