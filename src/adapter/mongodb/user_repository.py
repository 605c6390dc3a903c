"""MongoDB implementation of UserRepository."""

from datetime import datetime, timezone
from logging import getLogger
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, IndexModel
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError
from adapter.mongodb import USERS_COLLECTION_NAME
from domain.model.errors import DuplicateError, StorageError
from domain.model.user import User

logger = getLogger(__name__)

USER_INDEXES = [
    IndexModel([('email', ASCENDING)], name='idx_users_email', unique=True),
    IndexModel([('userName', ASCENDING)], name='idx_users_user_name', unique=True),
    IndexModel([('isOnline', ASCENDING)], name='idx_users_is_online'),
]


class MongoUserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create the unique email/userName indexes and the isOnline index.

        Called at app startup. Existing identical indexes are left alone.
        """
        try:
            self.collection.create_indexes(USER_INDEXES)
            return True
        except PyMongoError as e:
            logger.error("Failed to create users indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> User:
        """Convert MongoDB document to User domain model."""
        return User(
            id=str(doc['_id']),
            user_name=doc['userName'],
            email=doc['email'],
            password_hash=doc['passwordHash'],
            is_online=doc.get('isOnline', False),
            created_at=doc.get('createdAt'),
            updated_at=doc.get('updatedAt'),
        )

    def create(self, user_name: str, email: str, password_hash: str) -> User:
        """Insert a new user document and return the User object."""
        now = datetime.now(timezone.utc)
        user_doc = {
            'userName': user_name,
            'email': email,
            'passwordHash': password_hash,
            'isOnline': False,
            'createdAt': now,
            'updatedAt': now,
        }
        try:
            result = self.collection.insert_one(user_doc)
        except DuplicateKeyError as e:
            key_pattern = (e.details or {}).get('keyPattern') or {}
            logger.warning("User creation failed: duplicate key",
                           extra={"email": email, "keyPattern": key_pattern})
            if 'userName' in key_pattern:
                raise DuplicateError("User name already taken.") from e
            raise DuplicateError("Email already registered.") from e
        except PyMongoError as e:
            logger.error("Failed to create user", extra={"email": email, "error": str(e)})
            raise StorageError("Failed to create user") from e

        user_doc['_id'] = result.inserted_id
        user = self._to_domain(user_doc)
        logger.info("User created", extra={"userId": user.id, "email": email})
        return user

    def get_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        try:
            doc = self.collection.find_one({'email': email})
        except PyMongoError as e:
            logger.error("Failed to get user by email", extra={"email": email, "error": str(e)})
            raise StorageError("Failed to get user") from e
        return self._to_domain(doc) if doc else None

    def set_online(self, user_id: str, is_online: bool) -> bool:
        """Set the online flag for a user. Return False if no user matched."""
        try:
            oid = ObjectId(user_id)
        except (InvalidId, TypeError):
            return False
        try:
            result = self.collection.update_one(
                {'_id': oid},
                {'$set': {'isOnline': is_online, 'updatedAt': datetime.now(timezone.utc)}}
            )
        except PyMongoError as e:
            logger.error("Failed to update online status", extra={"userId": user_id, "error": str(e)})
            raise StorageError("Failed to update user") from e

        if result.matched_count == 0:
            return False
        logger.debug("Updated online status", extra={"userId": user_id, "isOnline": is_online})
        return True

    def count(self) -> int:
        """Count all user documents."""
        try:
            return self.collection.count_documents({})
        except PyMongoError as e:
            logger.error("Failed to count users", extra={"error": str(e)})
            raise StorageError("Failed to count users") from e

    def count_online(self) -> int:
        """Count user documents flagged online."""
        try:
            return self.collection.count_documents({'isOnline': True})
        except PyMongoError as e:
            logger.error("Failed to count online users", extra={"error": str(e)})
            raise StorageError("Failed to count online users") from e
