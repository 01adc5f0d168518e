class ConsoleError(Exception):
    error_code = "console_error"
    user_message = "Something went wrong. Please reload the console."
    scope = "app"


class AuthenticationFailed(ConsoleError):
    error_code = "authentication_failed"
    user_message = "Unable to authenticate. Please try again later."
    scope = "app"


class ListFetchFailed(ConsoleError):
    error_code = "list_fetch_failed"
    user_message = "Failed to fetch videos."
    scope = "page"


class ItemReviewFailed(ConsoleError):
    error_code = "item_review_failed"
    user_message = "Review could not be submitted. Try again."
    scope = "item"
