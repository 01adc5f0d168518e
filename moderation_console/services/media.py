from __future__ import annotations

from moderation_console.schemas import Post

SPRITE_MARKER = "imageSprite"
PLAYABLE_VIDEO_SUFFIX = "v.f1484071.mp4"


def format_preview_url(url: str) -> str:
    """Map a thumbnail sprite-sheet URL onto the playable rendition beside it.

    ``https://cdn/x/imageSprite123.jpg`` becomes ``https://cdn/x/v.f1484071.mp4``.
    URLs without the marker are returned unchanged.
    """
    marker_index = url.find(SPRITE_MARKER)
    if marker_index == -1:
        return url
    return url[:marker_index] + PLAYABLE_VIDEO_SUFFIX


def has_preview(post: Post) -> bool:
    return bool(post.preview_video_url)


def visible_posts(posts: list[Post]) -> list[Post]:
    return [post for post in posts if has_preview(post)]
