import logging
from itertools import count
from typing import Any

from hopelink.models.user import User, UserCreate
from hopelink.models.initiative import Initiative, InitiativeCreate
from hopelink.models.story import Story, StoryCreate
from hopelink.models.message import Message, MessageCreate
from hopelink.models.donation import Donation, DonationCreate, Support, SupportCreate

logger = logging.getLogger(__name__)

USERS = "users"
INITIATIVES = "initiatives"
STORIES = "stories"
MESSAGES = "messages"
DONATIONS = "donations"
SUPPORTS = "supports"

class MemoryDataAccess:
    """
    Process-local store: one dict per entity, keyed by an auto-incrementing id.
    Every query is a linear scan and nothing survives a restart.
    """
    def __init__(self):
        self.tables: dict[str, dict[int, Any]] = {
            name: {} for name in (USERS, INITIATIVES, STORIES, MESSAGES, DONATIONS, SUPPORTS)
        }
        self._ids = {name: count(1) for name in self.tables}

    def _next_id(self, table: str) -> int:
        return next(self._ids[table])

    def _update(self, table: str, record_id: int, updates: dict) -> Any | None:
        record = self.tables[table].get(record_id)
        if record is None:
            return None
        updated = record.model_copy(update=updates)
        self.tables[table][record_id] = updated
        return updated

    # Users

    def get_user(self, user_id: int) -> User | None:
        return self.tables[USERS].get(user_id)

    def get_user_by_email(self, email: str) -> User | None:
        wanted = email.lower()
        return next((u for u in self.tables[USERS].values() if u.email.lower() == wanted), None)

    def get_user_by_username(self, username: str) -> User | None:
        return next((u for u in self.tables[USERS].values() if u.username == username), None)

    def create_user(self, user: UserCreate) -> User:
        record = User(id=self._next_id(USERS), **user.model_dump())
        self.tables[USERS][record.id] = record
        return record

    def update_user(self, user_id: int, updates: dict) -> User | None:
        return self._update(USERS, user_id, updates)

    def get_users_by_type(self, user_type: str) -> list[User]:
        return [u for u in self.tables[USERS].values() if u.user_type == user_type]

    # Initiatives

    def get_initiative(self, initiative_id: int) -> Initiative | None:
        return self.tables[INITIATIVES].get(initiative_id)

    def get_initiatives(self) -> list[Initiative]:
        return sorted(
            self.tables[INITIATIVES].values(),
            key=lambda i: (i.created_at, i.id),
            reverse=True
        )

    def get_initiatives_by_runner(self, runner_id: int) -> list[Initiative]:
        return [i for i in self.tables[INITIATIVES].values() if i.runner_id == runner_id]

    def get_initiatives_by_category(self, category: str) -> list[Initiative]:
        return [i for i in self.tables[INITIATIVES].values() if i.category == category]

    def get_initiatives_by_country(self, country: str) -> list[Initiative]:
        return [i for i in self.tables[INITIATIVES].values() if i.country == country]

    def get_available_countries(self) -> list[str]:
        return sorted({i.country for i in self.tables[INITIATIVES].values()})

    def create_initiative(self, initiative: InitiativeCreate) -> Initiative:
        record = Initiative(id=self._next_id(INITIATIVES), **initiative.model_dump())
        self.tables[INITIATIVES][record.id] = record
        return record

    def update_initiative(self, initiative_id: int, updates: dict) -> Initiative | None:
        return self._update(INITIATIVES, initiative_id, updates)

    # Stories

    def get_story(self, story_id: int) -> Story | None:
        return self.tables[STORIES].get(story_id)

    def get_stories(self) -> list[Story]:
        return sorted(
            self.tables[STORIES].values(),
            key=lambda s: (s.created_at, s.id),
            reverse=True
        )

    def get_stories_by_author(self, author_id: int) -> list[Story]:
        return [s for s in self.tables[STORIES].values() if s.author_id == author_id]

    def get_stories_by_initiative(self, initiative_id: int) -> list[Story]:
        return [s for s in self.tables[STORIES].values() if s.initiative_id == initiative_id]

    def create_story(self, story: StoryCreate) -> Story:
        record = Story(id=self._next_id(STORIES), **story.model_dump())
        self.tables[STORIES][record.id] = record
        return record

    def update_story(self, story_id: int, updates: dict) -> Story | None:
        return self._update(STORIES, story_id, updates)

    def heart_story(self, story_id: int) -> Story | None:
        story = self.get_story(story_id)
        if story is None:
            return None
        return self._update(STORIES, story_id, {"hearts_count": story.hearts_count + 1})

    # Messages

    def get_message(self, message_id: int) -> Message | None:
        return self.tables[MESSAGES].get(message_id)

    def get_messages_between_users(self, user1_id: int, user2_id: int) -> list[Message]:
        pair = {user1_id, user2_id}
        thread = [
            m for m in self.tables[MESSAGES].values()
            if {m.sender_id, m.receiver_id} == pair
        ]
        return sorted(thread, key=lambda m: (m.created_at, m.id))

    def get_conversations_for_user(self, user_id: int) -> list[Message]:
        """
        Latest message per counterparty, most recent conversation first.
        """
        user_messages = sorted(
            (m for m in self.tables[MESSAGES].values()
             if m.sender_id == user_id or m.receiver_id == user_id),
            key=lambda m: (m.created_at, m.id),
            reverse=True
        )

        conversations: dict[int, Message] = {}
        for message in user_messages:
            conversations.setdefault(message.counterparty_of(user_id), message)

        return list(conversations.values())

    def create_message(self, message: MessageCreate) -> Message:
        record = Message(id=self._next_id(MESSAGES), **message.model_dump())
        self.tables[MESSAGES][record.id] = record
        return record

    def mark_message_as_read(self, message_id: int) -> Message | None:
        return self._update(MESSAGES, message_id, {"read": True})

    # Donations

    def get_donation(self, donation_id: int) -> Donation | None:
        return self.tables[DONATIONS].get(donation_id)

    def get_donations_by_donor(self, donor_id: int) -> list[Donation]:
        return [d for d in self.tables[DONATIONS].values() if d.donor_id == donor_id]

    def get_donations_by_initiative(self, initiative_id: int) -> list[Donation]:
        return [d for d in self.tables[DONATIONS].values() if d.initiative_id == initiative_id]

    def create_donation(self, donation: DonationCreate) -> Donation | None:
        """
        Records the donation and rebuilds the initiative totals from its full
        donation history. Returns None when the initiative does not exist.
        """
        if self.get_initiative(donation.initiative_id) is None:
            return None

        record = Donation(id=self._next_id(DONATIONS), **donation.model_dump())
        self.tables[DONATIONS][record.id] = record

        history = self.get_donations_by_initiative(donation.initiative_id)
        initiative = self.update_initiative(donation.initiative_id, {
            "raised_amount": sum(d.amount for d in history),
            "supporters_count": len({d.donor_id for d in history})
        })
        logger.info(
            f"Initiative {initiative.id} now at {initiative.raised_amount} "
            f"from {initiative.supporters_count} supporters."
        )
        return record

    # Supports

    def get_support(self, support_id: int) -> Support | None:
        return self.tables[SUPPORTS].get(support_id)

    def get_supports_by_donor(self, donor_id: int) -> list[Support]:
        return [s for s in self.tables[SUPPORTS].values() if s.donor_id == donor_id]

    def get_supports_by_beneficiary(self, beneficiary_id: int) -> list[Support]:
        return [s for s in self.tables[SUPPORTS].values() if s.beneficiary_id == beneficiary_id]

    def create_support(self, support: SupportCreate) -> Support:
        record = Support(id=self._next_id(SUPPORTS), **support.model_dump())
        self.tables[SUPPORTS][record.id] = record
        return record
