from __future__ import annotations

from moderation_console.enums import ItemPhase, ReviewDecision

_ALLOWED_DECISION_TRANSITIONS = {
    ReviewDecision.PENDING: {ReviewDecision.APPROVED, ReviewDecision.REJECTED},
    ReviewDecision.APPROVED: set(),
    ReviewDecision.REJECTED: set(),
}

_ALLOWED_ITEM_TRANSITIONS = {
    ItemPhase.IDLE: {ItemPhase.SUBMITTING},
    ItemPhase.SUBMITTING: {ItemPhase.IDLE, ItemPhase.COMPLETE},
    ItemPhase.COMPLETE: set(),
}


def can_transition_decision(current: ReviewDecision, target: ReviewDecision) -> bool:
    return target in _ALLOWED_DECISION_TRANSITIONS.get(current, set())


def can_transition_item(current: ItemPhase, target: ItemPhase) -> bool:
    return target in _ALLOWED_ITEM_TRANSITIONS.get(current, set())
