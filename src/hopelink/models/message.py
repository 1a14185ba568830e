from datetime import datetime
from pydantic import Field

from hopelink.models.base import CamelModel


class MessageCreate(CamelModel):
    sender_id: int
    receiver_id: int
    content: str = Field(min_length=1)

class Message(MessageCreate):
    id: int
    read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)

    def counterparty_of(self, user_id: int) -> int:
        return self.receiver_id if self.sender_id == user_id else self.sender_id
