from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from moderation_console.enums import AuthPhase, BrowseMode, ItemPhase, ListPhase, ReviewDecision

# Server-side constants written back with every metadata update.
FIXED_COMMENT_PERMISSION = 1
FIXED_PROTECTION_LEVEL = 1


class Credential(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    username: str
    password: str
    code_2fa: str = Field(alias="code2FA")


class Session(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str
    username: str


class LoginResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    access_token: Optional[str] = Field(default=None, alias="accessToken")


class Post(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    creator_id: str = Field(default="", alias="creatorID")
    content: str = ""
    cover_url: str = Field(default="", alias="coverUrl")
    preview_video_url: str = Field(default="", alias="webVttUrl")

    @field_validator("id", "creator_id", mode="before")
    @classmethod
    def normalize_identifier(cls, v: object) -> object:
        """The admin API sends ids as numbers on some environments."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(int(v))
        return v

    @field_validator("content", "cover_url", "preview_video_url", mode="before")
    @classmethod
    def none_to_empty(cls, v: object) -> object:
        return "" if v is None else v


class PageResult(BaseModel):
    model_config = ConfigDict(extra="ignore")

    total: int = 0

    @field_validator("total", mode="before")
    @classmethod
    def none_to_zero(cls, v: object) -> object:
        return 0 if v is None else v


class PostPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    items: list[Post] = Field(default_factory=list, alias="data")
    page_result: PageResult = Field(default_factory=PageResult, alias="pageResult")

    @field_validator("items", mode="before")
    @classmethod
    def none_to_list(cls, v: object) -> object:
        return [] if v is None else v

    @field_validator("page_result", mode="before")
    @classmethod
    def none_to_page_result(cls, v: object) -> object:
        return {} if v is None else v

    @property
    def total(self) -> int:
        return self.page_result.total


class ReviewStatusRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    post_ids: list[str] = Field(alias="postIDs")
    review_status: int = Field(alias="reviewStatus")


class PostUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    comment_permission: int = Field(default=FIXED_COMMENT_PERMISSION, alias="commentPermission")
    content: str
    member_id: str = Field(alias="memberID")
    post_id: str = Field(alias="postID")
    protection_level: int = Field(default=FIXED_PROTECTION_LEVEL, alias="protectionLv")


class ItemSnapshot(BaseModel):
    post_id: str
    content: str
    cover_url: str
    player_url: str
    decision: ReviewDecision
    phase: ItemPhase
    can_submit: bool


class PageSnapshot(BaseModel):
    current_page: int
    page_size: int
    total_items: int
    total_pages: int
    can_go_previous: bool
    can_go_next: bool
    browse_mode: BrowseMode


class ConsoleSnapshot(BaseModel):
    auth_phase: AuthPhase
    username: Optional[str] = None
    auth_error: Optional[str] = None
    list_phase: ListPhase
    list_error: Optional[str] = None
    page: PageSnapshot
    items: list[ItemSnapshot] = Field(default_factory=list)
