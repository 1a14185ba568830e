from datetime import datetime
from pydantic import Field
from typing import Literal

from hopelink.models.base import CamelModel, DEFAULT_COUNTRY


InitiativeCategory = Literal["education", "skill_development", "community", "healthcare", "livelihood"]
InitiativeStatus = Literal["active", "completed", "paused"]

class InitiativeCreate(CamelModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    category: InitiativeCategory
    goal_amount: int = Field(gt=0)
    cover_image: str | None = None
    runner_id: int
    country: str = DEFAULT_COUNTRY
    status: InitiativeStatus = "active"

class Initiative(InitiativeCreate):
    id: int

    # Written only by the donation ledger.
    raised_amount: int = 0
    supporters_count: int = 0

    created_at: datetime = Field(default_factory=datetime.now)
