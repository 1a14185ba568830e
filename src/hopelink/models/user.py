from datetime import datetime
from pydantic import Field, EmailStr
from typing import Literal

from hopelink.models.base import CamelModel, DEFAULT_COUNTRY


UserType = Literal["donor", "beneficiary", "initiative_runner"]

class UserCreate(CamelModel):
    username: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=1)
    user_type: UserType
    full_name: str = Field(min_length=1)
    avatar: str | None = None
    bio: str | None = None
    location: str | None = None
    country: str = DEFAULT_COUNTRY
    verified: bool = False

class User(UserCreate):
    id: int
    # holds the bcrypt hash once stored, never the raw password
    password: str
    created_at: datetime = Field(default_factory=datetime.now)
