from datetime import datetime
from pydantic import Field
from typing import Literal

from hopelink.models.base import CamelModel


MediaType = Literal["image", "video"]

class StoryCreate(CamelModel):
    content: str = Field(min_length=1)
    media_url: str | None = None
    media_type: MediaType | None = None
    author_id: int
    initiative_id: int | None = None

class Story(StoryCreate):
    id: int
    hearts_count: int = 0
    created_at: datetime = Field(default_factory=datetime.now)
