from pydantic import Field, EmailStr
from datetime import datetime

from hopelink.models.base import CamelModel
from hopelink.models.user import UserType
from hopelink.models.initiative import InitiativeCategory, InitiativeStatus
from hopelink.models.story import MediaType


class LoginRequest(CamelModel):
    # Not EmailStr: a malformed email is a failed login, not a bad request.
    email: str
    password: str

class UserResponse(CamelModel):
    id: int
    username: str
    email: str
    user_type: UserType
    full_name: str
    avatar: str | None = None
    bio: str | None = None
    location: str | None = None
    country: str
    verified: bool
    created_at: datetime

class UserUpdate(CamelModel):
    username: str | None = Field(default=None, min_length=1)
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=1)
    user_type: UserType | None = None
    full_name: str | None = Field(default=None, min_length=1)
    avatar: str | None = None
    bio: str | None = None
    location: str | None = None
    country: str | None = None
    verified: bool | None = None

class InitiativeUpdate(CamelModel):
    # raisedAmount and supportersCount belong to the donation ledger.
    title: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    category: InitiativeCategory | None = None
    goal_amount: int | None = Field(default=None, gt=0)
    cover_image: str | None = None
    country: str | None = None
    status: InitiativeStatus | None = None

class StoryUpdate(CamelModel):
    content: str | None = Field(default=None, min_length=1)
    media_url: str | None = None
    media_type: MediaType | None = None
    initiative_id: int | None = None
