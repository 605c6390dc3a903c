"""In-memory implementation of UserRepository for testing."""

import uuid
from datetime import datetime, timezone
from domain.model.errors import DuplicateError
from domain.model.user import User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}

    # ── write operations ─────────────────────────────────────

    def create(self, user_name: str, email: str, password_hash: str) -> User:
        for existing in self.store.values():
            if existing.email == email:
                raise DuplicateError("Email already registered.")
            if existing.user_name == user_name:
                raise DuplicateError("User name already taken.")

        user_id = uuid.uuid4().hex
        now = datetime.now(timezone.utc)

        user = User(
            id=user_id,
            user_name=user_name,
            email=email,
            password_hash=password_hash,
            is_online=False,
            created_at=now,
            updated_at=now,
        )
        self.store[user_id] = user
        return user

    def set_online(self, user_id: str, is_online: bool) -> bool:
        user = self.store.get(user_id)
        if not user:
            return False

        user.is_online = is_online
        user.updated_at = datetime.now(timezone.utc)
        return True

    # ── read operations ──────────────────────────────────────

    def get_by_email(self, email: str) -> User | None:
        for user in self.store.values():
            if user.email == email:
                return user
        return None

    def count(self) -> int:
        return len(self.store)

    def count_online(self) -> int:
        return sum(1 for u in self.store.values() if u.is_online)

    # ── test helpers ─────────────────────────────────────────

    def get_by_id(self, user_id: str) -> User | None:
        return self.store.get(user_id)
