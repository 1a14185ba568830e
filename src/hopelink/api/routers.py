from fastapi import APIRouter, Depends, Query

from hopelink.core.dependencies import (
    get_user_service,
    get_initiative_service,
    get_story_service,
    get_message_service,
    get_donation_service,
    get_support_service,
)
from hopelink.services.user_service import UserService
from hopelink.services.initiative_service import InitiativeService
from hopelink.services.story_service import StoryService
from hopelink.services.message_service import MessageService
from hopelink.services.donation_service import DonationService
from hopelink.services.support_service import SupportService
from hopelink.models.user import UserCreate
from hopelink.models.initiative import Initiative, InitiativeCreate
from hopelink.models.story import Story, StoryCreate
from hopelink.models.message import Message, MessageCreate
from hopelink.models.donation import Donation, DonationCreate, Support, SupportCreate
from hopelink.api.schemas import (
    LoginRequest,
    UserResponse,
    UserUpdate,
    InitiativeUpdate,
    StoryUpdate,
)

router = APIRouter(prefix="/api")


# Auth

@router.post("/register", response_model=UserResponse)
def register(body: UserCreate, users: UserService = Depends(get_user_service)):
    return users.register(body)

@router.post("/login", response_model=UserResponse)
def login(body: LoginRequest, users: UserService = Depends(get_user_service)):
    return users.login(email=body.email, password=body.password)


# Users

@router.get("/users", response_model=list[UserResponse])
def list_users(
    user_type: str | None = Query(default=None, alias="type"),
    users: UserService = Depends(get_user_service)
):
    return users.list_users(user_type)

@router.get("/users/{user_id}", response_model=UserResponse)
def get_user(user_id: int, users: UserService = Depends(get_user_service)):
    return users.get_user(user_id)

@router.put("/users/{user_id}", response_model=UserResponse)
def update_user(user_id: int, body: UserUpdate, users: UserService = Depends(get_user_service)):
    return users.update_user(user_id, body.model_dump(exclude_none=True))


# Initiatives

@router.get("/initiatives", response_model=list[Initiative])
def list_initiatives(
    category: str | None = None,
    runner: int | None = None,
    country: str | None = None,
    initiatives: InitiativeService = Depends(get_initiative_service)
):
    return initiatives.list_initiatives(category=category, runner_id=runner, country=country)

@router.get("/initiatives/{initiative_id}", response_model=Initiative)
def get_initiative(initiative_id: int, initiatives: InitiativeService = Depends(get_initiative_service)):
    return initiatives.get_initiative(initiative_id)

@router.post("/initiatives", response_model=Initiative)
def create_initiative(body: InitiativeCreate, initiatives: InitiativeService = Depends(get_initiative_service)):
    return initiatives.create_initiative(body)

@router.put("/initiatives/{initiative_id}", response_model=Initiative)
def update_initiative(
    initiative_id: int,
    body: InitiativeUpdate,
    initiatives: InitiativeService = Depends(get_initiative_service)
):
    return initiatives.update_initiative(initiative_id, body.model_dump(exclude_none=True))

@router.get("/countries", response_model=list[str])
def list_countries(initiatives: InitiativeService = Depends(get_initiative_service)):
    return initiatives.list_countries()


# Stories

@router.get("/stories", response_model=list[Story])
def list_stories(
    author: int | None = None,
    initiative: int | None = None,
    stories: StoryService = Depends(get_story_service)
):
    return stories.list_stories(author_id=author, initiative_id=initiative)

@router.get("/stories/{story_id}", response_model=Story)
def get_story(story_id: int, stories: StoryService = Depends(get_story_service)):
    return stories.get_story(story_id)

@router.post("/stories", response_model=Story)
def create_story(body: StoryCreate, stories: StoryService = Depends(get_story_service)):
    return stories.create_story(body)

@router.put("/stories/{story_id}", response_model=Story)
def update_story(story_id: int, body: StoryUpdate, stories: StoryService = Depends(get_story_service)):
    return stories.update_story(story_id, body.model_dump(exclude_none=True))

@router.post("/stories/{story_id}/heart", response_model=Story)
def heart_story(story_id: int, stories: StoryService = Depends(get_story_service)):
    return stories.heart_story(story_id)


# Messages

@router.get("/conversations/{user_id}", response_model=list[Message])
def list_conversations(user_id: int, messages: MessageService = Depends(get_message_service)):
    return messages.list_conversations(user_id)

@router.get("/messages/{user1_id}/{user2_id}", response_model=list[Message])
def get_thread(user1_id: int, user2_id: int, messages: MessageService = Depends(get_message_service)):
    return messages.get_thread(user1_id, user2_id)

@router.post("/messages", response_model=Message)
def send_message(body: MessageCreate, messages: MessageService = Depends(get_message_service)):
    return messages.send_message(body)

@router.put("/messages/{message_id}/read", response_model=Message)
def mark_message_read(message_id: int, messages: MessageService = Depends(get_message_service)):
    return messages.mark_as_read(message_id)


# Donations

@router.get("/donations", response_model=list[Donation])
def list_donations(
    donor: int | None = None,
    initiative: int | None = None,
    donations: DonationService = Depends(get_donation_service)
):
    return donations.list_donations(donor_id=donor, initiative_id=initiative)

@router.post("/donations", response_model=Donation)
def create_donation(body: DonationCreate, donations: DonationService = Depends(get_donation_service)):
    return donations.create_donation(body)


# Supports

@router.get("/supports", response_model=list[Support])
def list_supports(
    donor: int | None = None,
    beneficiary: int | None = None,
    supports: SupportService = Depends(get_support_service)
):
    return supports.list_supports(donor_id=donor, beneficiary_id=beneficiary)

@router.post("/supports", response_model=Support)
def create_support(body: SupportCreate, supports: SupportService = Depends(get_support_service)):
    return supports.create_support(body)
