import logging

from hopelink.core.errors import NotFoundError
from hopelink.data_access.memory import MemoryDataAccess
from hopelink.models.message import Message, MessageCreate

logger = logging.getLogger(__name__)

class MessageService:
    def __init__(self, data_access: MemoryDataAccess):
        self.data_access = data_access

    def list_conversations(self, user_id: int) -> list[Message]:
        return self.data_access.get_conversations_for_user(user_id)

    def get_thread(self, user1_id: int, user2_id: int) -> list[Message]:
        return self.data_access.get_messages_between_users(user1_id, user2_id)

    def send_message(self, message: MessageCreate) -> Message:
        created = self.data_access.create_message(message)
        logger.info(f"Message {created.id} sent from {created.sender_id} to {created.receiver_id}")
        return created

    def mark_as_read(self, message_id: int) -> Message:
        message = self.data_access.mark_message_as_read(message_id)
        if not message:
            logger.warning(f"Message {message_id} not found")
            raise NotFoundError("Message not found")
        return message
