import logging

from hopelink.core.errors import ConflictError, InvalidCredentialsError, NotFoundError
from hopelink.core.security import hash_password, verify_password
from hopelink.data_access.memory import MemoryDataAccess
from hopelink.models.user import User, UserCreate

logger = logging.getLogger(__name__)

DEFAULT_BROWSE_TYPE = "donor"

class UserService:
    def __init__(self, data_access: MemoryDataAccess):
        self.data_access = data_access

    def register(self, user: UserCreate) -> User:
        if self.data_access.get_user_by_email(user.email):
            logger.warning(f"Registration rejected: email {user.email} already in use")
            raise ConflictError("User already exists")
        if self.data_access.get_user_by_username(user.username):
            logger.warning(f"Registration rejected: username {user.username} already in use")
            raise ConflictError("Username already taken")

        created = self.data_access.create_user(
            user.model_copy(update={"password": hash_password(user.password)})
        )
        logger.info(f"Registered {created.user_type} user {created.id}")
        return created

    def login(self, email: str, password: str) -> User:
        user = self.data_access.get_user_by_email(email)

        if not user or not verify_password(password, user.password):
            logger.warning(f"Failed login for {email}")
            raise InvalidCredentialsError("Invalid credentials")

        return user

    def get_user(self, user_id: int) -> User:
        user = self.data_access.get_user(user_id)
        if not user:
            logger.warning(f"User {user_id} not found")
            raise NotFoundError("User not found")
        return user

    def list_users(self, user_type: str | None = None) -> list[User]:
        return self.data_access.get_users_by_type(user_type or DEFAULT_BROWSE_TYPE)

    def update_user(self, user_id: int, updates: dict) -> User:
        if "email" in updates:
            owner = self.data_access.get_user_by_email(updates["email"])
            if owner and owner.id != user_id:
                raise ConflictError("User already exists")
        if "username" in updates:
            owner = self.data_access.get_user_by_username(updates["username"])
            if owner and owner.id != user_id:
                raise ConflictError("Username already taken")
        if "password" in updates:
            updates = {**updates, "password": hash_password(updates["password"])}

        user = self.data_access.update_user(user_id, updates)
        if not user:
            logger.warning(f"User {user_id} not found")
            raise NotFoundError("User not found")
        return user
