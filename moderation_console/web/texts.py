from moderation_console.enums import ReviewDecision

LOADING_MESSAGE = "Loading..."
LOADING_VIDEOS_MESSAGE = "Loading videos..."
EMPTY_QUEUE_MESSAGE = "No videos are waiting for review on this page."
SUBMITTING_MESSAGE = "Submitting review..."
NO_COVER_MESSAGE = "No cover image"
NO_VIDEO_URL_MESSAGE = "No video URL available"
UNSUPPORTED_VIDEO_MESSAGE = "Your browser does not support the video tag."

STATUS_LABELS = {
    ReviewDecision.APPROVED: "Approved",
    ReviewDecision.REJECTED: "Rejected",
    ReviewDecision.PENDING: "Not reviewed",
}

STATUS_CLASSES = {
    ReviewDecision.APPROVED: "status-approved",
    ReviewDecision.REJECTED: "status-rejected",
    ReviewDecision.PENDING: "status-pending",
}


def pending_total_message(total: int) -> str:
    return f"Videos awaiting review: {total}"


def page_position_message(current: int, total_pages: int) -> str:
    return f"Page {current} of {total_pages}"
