from moderation_console.client.admin_api import AdminApiClient
from moderation_console.client.interfaces import LoginClient, PostListClient, ReviewClient

__all__ = [
    "AdminApiClient",
    "LoginClient",
    "PostListClient",
    "ReviewClient",
]
