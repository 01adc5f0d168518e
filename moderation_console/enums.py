from enum import Enum, IntEnum


class ReviewDecision(IntEnum):
    PENDING = -1
    APPROVED = 2
    REJECTED = 3


class ItemPhase(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    COMPLETE = "complete"


class ListPhase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class AuthPhase(str, Enum):
    PENDING = "pending"
    AUTHENTICATING = "authenticating"
    AUTHENTICATED = "authenticated"
    FAILED = "failed"


class BrowseMode(str, Enum):
    SEQUENTIAL = "sequential"
    RANDOM_SAMPLE = "random_sample"


class DecisionAction(str, Enum):
    APPROVE = "approve"
    REJECT = "reject"

    @property
    def decision(self) -> ReviewDecision:
        if self is DecisionAction.APPROVE:
            return ReviewDecision.APPROVED
        return ReviewDecision.REJECTED


class NavigationTarget(str, Enum):
    PREVIOUS = "previous"
    NEXT = "next"
    LAST = "last"
