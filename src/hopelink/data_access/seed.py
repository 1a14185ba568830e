import logging

from hopelink.core.security import hash_password
from hopelink.data_access.memory import MemoryDataAccess, USERS
from hopelink.models.user import UserCreate
from hopelink.models.initiative import InitiativeCreate
from hopelink.models.story import StoryCreate
from hopelink.models.message import MessageCreate
from hopelink.models.donation import DonationCreate, SupportCreate

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "demo-password"


def seed_demo_data(data_access: MemoryDataAccess) -> None:
    if data_access.tables[USERS]:
        return

    def user(username: str, full_name: str, user_type: str, country: str = "United States"):
        return data_access.create_user(UserCreate(
            username=username,
            email=f"{username}@example.com",
            password=hash_password(DEMO_PASSWORD),
            user_type=user_type,
            full_name=full_name,
            country=country,
            verified=True
        ))

    runner = user("asha", "Asha Rao", "initiative_runner", country="India")
    donor = user("daniel", "Daniel Kim", "donor")
    beneficiary = user("priya", "Priya Nair", "beneficiary", country="India")

    samples = [
        InitiativeCreate(
            title="Laptops for Rural Classrooms",
            description="Refurbished laptops and offline course packs for village schools.",
            category="education",
            goal_amount=500000,
            runner_id=runner.id,
            country="India"
        ),
        InitiativeCreate(
            title="Tailoring Starter Kits",
            description="Sewing machines and a three-month mentorship for new tailors.",
            category="livelihood",
            goal_amount=250000,
            runner_id=runner.id,
            country="India"
        ),
        InitiativeCreate(
            title="After-school Coding Club",
            description="Weekly coding sessions for middle school students.",
            category="skill_development",
            goal_amount=120000,
            runner_id=runner.id
        ),
    ]
    initiatives = [data_access.create_initiative(s) for s in samples]

    data_access.create_donation(DonationCreate(
        donor_id=donor.id,
        initiative_id=initiatives[0].id,
        amount=5000,
        message="Keep going!"
    ))
    data_access.create_support(SupportCreate(
        donor_id=donor.id,
        beneficiary_id=beneficiary.id,
        initiative_id=initiatives[0].id
    ))
    data_access.create_story(StoryCreate(
        content="Our first class finished the typing course this week.",
        author_id=beneficiary.id,
        initiative_id=initiatives[0].id
    ))
    data_access.create_message(MessageCreate(
        sender_id=donor.id,
        receiver_id=runner.id,
        content="How are the laptops holding up?"
    ))

    logger.info(f"Seeded demo data: {len(initiatives)} initiatives, 3 users.")
