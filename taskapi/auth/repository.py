import logging
from abc import ABC, abstractmethod
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from taskapi.auth.models import User

logger = logging.getLogger(__name__)


class UserRepositoryInterface(ABC):
    """Abstract interface for user repository.

    This interface allows swapping implementations (in-memory -> MongoDB).
    """

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user.

        Raises pymongo.errors.DuplicateKeyError if the username is taken.
        """
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        pass

    @abstractmethod
    async def exists_by_username(self, username: str) -> bool:
        """Check if username exists."""
        pass


class MongoUserRepository(UserRepositoryInterface):
    """MongoDB implementation of the user repository.

    Username uniqueness is backed by a unique index created in Database.ensure_indexes.
    """

    COLLECTION_NAME = "users"

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[self.COLLECTION_NAME]

    async def create(self, user: User) -> User:
        await self.collection.insert_one(user.to_dict())
        logger.info(f"[MongoUserRepository] Created user: username={user.username}, id={user.id}")
        return user

    async def get_by_username(self, username: str) -> Optional[User]:
        doc = await self.collection.find_one({"username": username})
        if doc is None:
            return None
        return User.from_dict(doc)

    async def exists_by_username(self, username: str) -> bool:
        count = await self.collection.count_documents({"username": username}, limit=1)
        return count > 0
