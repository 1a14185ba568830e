from functools import lru_cache

from fastapi import Depends

from hopelink.core.config import settings
from hopelink.data_access.memory import MemoryDataAccess
from hopelink.data_access.seed import seed_demo_data
from hopelink.services.user_service import UserService
from hopelink.services.initiative_service import InitiativeService
from hopelink.services.story_service import StoryService
from hopelink.services.message_service import MessageService
from hopelink.services.donation_service import DonationService
from hopelink.services.support_service import SupportService


@lru_cache()
def get_data_access() -> MemoryDataAccess:
    data_access = MemoryDataAccess()
    if settings.SEED_DEMO_DATA:
        seed_demo_data(data_access)
    return data_access

def get_user_service(data_access: MemoryDataAccess = Depends(get_data_access)) -> UserService:
    return UserService(data_access=data_access)

def get_initiative_service(data_access: MemoryDataAccess = Depends(get_data_access)) -> InitiativeService:
    return InitiativeService(data_access=data_access)

def get_story_service(data_access: MemoryDataAccess = Depends(get_data_access)) -> StoryService:
    return StoryService(data_access=data_access)

def get_message_service(data_access: MemoryDataAccess = Depends(get_data_access)) -> MessageService:
    return MessageService(data_access=data_access)

def get_donation_service(data_access: MemoryDataAccess = Depends(get_data_access)) -> DonationService:
    return DonationService(data_access=data_access)

def get_support_service(data_access: MemoryDataAccess = Depends(get_data_access)) -> SupportService:
    return SupportService(data_access=data_access)
