import logging
from typing import Dict, Optional

from app.core.errors import DriveEmailInUse, NotFoundOrForbidden, UsernameTaken
from app.core.security import hash_password
from app.db.store import DataStore
from app.models.base import _utcnow
from app.models.user import UserCreate, UserInDB

logger = logging.getLogger(__name__)


class UserRepository:
    """User store operations."""

    def __init__(self, store: DataStore):
        self.store = store
        self.users: Dict[int, UserInDB] = store.table("users")

    def _require(self, user_id: int) -> UserInDB:
        user = self.users.get(user_id)
        if user is None:
            raise NotFoundOrForbidden("User", user_id)
        return user

    def _find_by_username(self, username: str) -> UserInDB | None:
        for user in self.users.values():
            if user.username == username:
                return user
        return None

    async def create_user(self, user_data: UserCreate) -> UserInDB:
        """Create a new user."""
        if self._find_by_username(user_data.username):
            raise UsernameTaken(user_data.username)

        user = UserInDB(
            id=self.store.ids.next("user"),
            username=user_data.username,
            password_hash=hash_password(user_data.password),
            created_at=_utcnow()
        )
        self.users[user.id] = user
        logger.info("Registered user %s", user.id)
        return user.model_copy()

    async def get_user(self, user_id: int) -> UserInDB | None:
        """Get user by ID."""
        user = self.users.get(user_id)
        if user:
            return user.model_copy()
        return None

    async def get_user_by_username(self, username: str) -> UserInDB | None:
        """Get user by username."""
        user = self._find_by_username(username)
        if user:
            return user.model_copy()
        return None

    async def get_user_by_drive_email(self, email: str) -> UserInDB | None:
        """Get the user a drive account is linked to."""
        email = email.lower()
        for user in self.users.values():
            if user.drive_email == email:
                return user.model_copy()
        return None

    async def set_drive_email(self, user_id: int, email: Optional[str]) -> UserInDB:
        """Link a drive account, or unlink with None. One user per account."""
        user = self._require(user_id)
        if email is not None:
            email = email.lower()
            for other in self.users.values():
                if other.drive_email == email and other.id != user_id:
                    raise DriveEmailInUse(email)

        updated = user.model_copy(update={"drive_email": email})
        self.users[user_id] = updated
        logger.info("Drive account %s for user %s", "linked" if email else "unlinked", user_id)
        return updated.model_copy()

    async def set_biometric(self, user_id: int, enabled: bool) -> UserInDB:
        """Toggle biometric unlock."""
        user = self._require(user_id)
        updated = user.model_copy(update={"biometric_enabled": enabled})
        self.users[user_id] = updated
        return updated.model_copy()

    async def clear_user_data(self, user_id: int) -> Dict[str, int]:
        """Remove every record the user owns; the user itself is kept."""
        self._require(user_id)
        return self.store.clear_user_data(user_id)
