from moderation_console.schemas.contracts import (
    ConsoleSnapshot,
    Credential,
    ItemSnapshot,
    LoginResponse,
    PageResult,
    PageSnapshot,
    Post,
    PostPage,
    PostUpdateRequest,
    ReviewStatusRequest,
    Session,
)

__all__ = [
    "Credential",
    "Session",
    "LoginResponse",
    "Post",
    "PageResult",
    "PostPage",
    "ReviewStatusRequest",
    "PostUpdateRequest",
    "ItemSnapshot",
    "PageSnapshot",
    "ConsoleSnapshot",
]
