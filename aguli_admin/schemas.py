from pydantic import BaseModel, Field, field_validator
from typing import Any
from .services.submission import ExploreStatus

class GoogleSignIn(BaseModel):
    credential: str

class CategoryCreate(BaseModel):
    cat_name: str
    cat_status: str = "active"
    cat_order: int = 0
    cat_thumb: str

    @field_validator("cat_name")
    @classmethod
    def name_required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Category name is required")
        return v

    @field_validator("cat_thumb")
    @classmethod
    def thumb_required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Thumbnail link is required")
        return v

class CategoryUpdate(BaseModel):
    cat_name: str
    cat_status: str = "active"
    cat_order: int = 0
    cat_thumbnail: str = ""

class LiveTvIn(BaseModel):
    live_tv_name: str
    live_tv_link: str

class PushNotificationIn(BaseModel):
    title: str = ""
    body: str = ""
    screen: str = "newsDetails"
    news_id: str = ""
    thumbnail_url: str = ""

    def missing_required(self) -> bool:
        return not (self.title and self.body and self.news_id)

class ComposeFields(BaseModel):
    title: str | None = None
    description: str | None = None
    status: ExploreStatus | None = None

class IndexIn(BaseModel):
    index: int

class ComposeImageOut(BaseModel):
    id: str
    index: int
    filename: str
    content_type: str
    size: int

class ComposeOut(BaseModel):
    id: str
    title: str
    description: str
    status: str
    images: list[ComposeImageOut] = Field(default_factory=list)
    capacity: int
    dragging: int | None = None
    submitting: bool = False

class ActionResult(BaseModel):
    ok: bool
    message: str | None = None
    data: Any = None
