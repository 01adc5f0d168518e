from __future__ import annotations

import asyncio
from typing import Optional

import structlog

from moderation_console.client import ReviewClient
from moderation_console.enums import ItemPhase, ReviewDecision
from moderation_console.errors import ItemReviewFailed
from moderation_console.schemas import ItemSnapshot, Post, PostUpdateRequest, ReviewStatusRequest
from moderation_console.services.media import format_preview_url
from moderation_console.services.state_machine import can_transition_decision, can_transition_item

logger = structlog.get_logger(__name__)


class ItemReviewController:
    """Approve/reject flow for one post on the current page.

    A decision is two writes against the admin API: the review status and a
    metadata update that re-submits the content. Both are sent together and the
    decision only sticks when both succeed. A half-applied decision is left as
    is on the server; the item stays Pending here and can be submitted again.
    """

    def __init__(self, client: ReviewClient, token: str, post: Post) -> None:
        self.client = client
        self.token = token
        self.post = post
        self.decision = ReviewDecision.PENDING
        self.phase = ItemPhase.IDLE
        self.last_error: Optional[ItemReviewFailed] = None

    @property
    def post_id(self) -> str:
        return self.post.id

    @property
    def player_url(self) -> str:
        return format_preview_url(self.post.preview_video_url)

    @property
    def is_submitting(self) -> bool:
        return self.phase is ItemPhase.SUBMITTING

    @property
    def update_complete(self) -> bool:
        return self.phase is ItemPhase.COMPLETE

    @property
    def can_submit(self) -> bool:
        return self.phase is ItemPhase.IDLE

    def snapshot(self) -> ItemSnapshot:
        return ItemSnapshot(
            post_id=self.post_id,
            content=self.post.content,
            cover_url=self.post.cover_url,
            player_url=self.player_url,
            decision=self.decision,
            phase=self.phase,
            can_submit=self.can_submit,
        )

    def _move(self, target: ItemPhase) -> None:
        if not can_transition_item(self.phase, target):
            raise RuntimeError(f"illegal item transition {self.phase.value} -> {target.value}")
        self.phase = target

    async def submit(self, decision: ReviewDecision) -> bool:
        """Submit ``decision``; return True when it was committed.

        Returns False without touching the API while a submission is in flight
        or after the item has completed.
        """
        if decision is ReviewDecision.PENDING:
            raise ValueError("Pending is not a reviewable decision")
        if not self.token:
            logger.error("review_submit_without_token", post_id=self.post_id)
            return False
        if not self.can_submit or not can_transition_decision(self.decision, decision):
            logger.info(
                "review_submit_ignored",
                post_id=self.post_id,
                phase=self.phase.value,
                decision=self.decision.name,
                requested=decision.name,
            )
            return False

        self._move(ItemPhase.SUBMITTING)
        self.last_error = None
        status_request = ReviewStatusRequest(post_ids=[self.post_id], review_status=int(decision))
        update_request = PostUpdateRequest(
            content=self.post.content,
            member_id=self.post.creator_id,
            post_id=self.post_id,
        )

        try:
            results = await asyncio.gather(
                self.client.set_review_status(self.token, status_request),
                self.client.update_post(self.token, update_request),
                return_exceptions=True,
            )
        except BaseException:
            # Cancelled mid-flight: nothing was committed, so the item stays editable.
            self._move(ItemPhase.IDLE)
            logger.warning("review_submit_cancelled", post_id=self.post_id, requested=decision.name)
            raise
        failures = [result for result in results if isinstance(result, BaseException)]
        if failures:
            self._move(ItemPhase.IDLE)
            for failure in failures:
                if not isinstance(failure, Exception):
                    raise failure
            self.last_error = ItemReviewFailed("; ".join(str(failure) for failure in failures))
            logger.error(
                "review_submit_failed",
                post_id=self.post_id,
                requested=decision.name,
                error=str(self.last_error),
            )
            return False

        self.decision = decision
        self._move(ItemPhase.COMPLETE)
        logger.info("review_submitted", post_id=self.post_id, decision=decision.name)
        return True
