"""
Task Manager API - Task Repository

Repository pattern for task data access.
Includes MongoDB implementation for runtime and an in-memory one for testing.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional, List

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, ReturnDocument

from taskapi.tasks.models import Task


class TaskRepositoryInterface(ABC):
    """
    Abstract interface for task repository.

    Enables swapping implementations (MongoDB for runtime, in-memory for tests).
    """

    @abstractmethod
    async def create(self, task: Task) -> Task:
        pass

    @abstractmethod
    async def get_by_id(self, task_id: str) -> Optional[Task]:
        pass

    @abstractmethod
    async def list_page(self, skip: int, limit: int) -> List[Task]:
        """List tasks by creation time, skipping `skip` and returning at most `limit`.

        The order is stable across calls; tasks created within the same
        millisecond are ordered by id rather than by insertion.
        """
        pass

    @abstractmethod
    async def update(self, task_id: str, updates: dict) -> Optional[Task]:
        """Apply `updates` to the stored task and return the new state."""
        pass

    @abstractmethod
    async def delete(self, task_id: str) -> Optional[Task]:
        """Delete a task and return what was stored, or None if absent."""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass


class TaskRepository(TaskRepositoryInterface):
    """MongoDB implementation of the task repository."""

    COLLECTION_NAME = "tasks"

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[self.COLLECTION_NAME]

    async def create(self, task: Task) -> Task:
        await self.collection.insert_one(task.to_dict())
        return task

    async def get_by_id(self, task_id: str) -> Optional[Task]:
        doc = await self.collection.find_one({"_id": task_id})
        if doc is None:
            return None
        return Task.from_dict(doc)

    async def list_page(self, skip: int, limit: int) -> List[Task]:
        cursor = (
            self.collection.find({})
            .sort([("created_at", ASCENDING), ("_id", ASCENDING)])
            .skip(skip)
            .limit(limit)
        )
        tasks: List[Task] = []
        async for doc in cursor:
            tasks.append(Task.from_dict(doc))
        return tasks

    async def update(self, task_id: str, updates: dict) -> Optional[Task]:
        # Single atomic $set, so concurrent updates to different fields both land
        fields = {**updates, "updated_at": datetime.now(timezone.utc)}

        result = await self.collection.find_one_and_update(
            {"_id": task_id},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )
        if result is None:
            return None
        return Task.from_dict(result)

    async def delete(self, task_id: str) -> Optional[Task]:
        result = await self.collection.find_one_and_delete({"_id": task_id})
        if result is None:
            return None
        return Task.from_dict(result)

    async def count(self) -> int:
        return await self.collection.count_documents({})


class InMemoryTaskRepository(TaskRepositoryInterface):
    """
    In-memory implementation for CI-safe testing.

    Dict insertion order stands in for creation order.
    """

    def __init__(self):
        self._tasks: dict[str, Task] = {}

    def clear(self) -> None:
        self._tasks.clear()

    async def create(self, task: Task) -> Task:
        self._tasks[task.id] = task
        return task

    async def get_by_id(self, task_id: str) -> Optional[Task]:
        return self._tasks.get(task_id)

    async def list_page(self, skip: int, limit: int) -> List[Task]:
        return list(self._tasks.values())[skip:skip + limit]

    async def update(self, task_id: str, updates: dict) -> Optional[Task]:
        task = self._tasks.get(task_id)
        if task is None:
            return None

        for key, value in updates.items():
            if hasattr(task, key):
                setattr(task, key, value)

        task.updated_at = datetime.now(timezone.utc)
        return task

    async def delete(self, task_id: str) -> Optional[Task]:
        return self._tasks.pop(task_id, None)

    async def count(self) -> int:
        return len(self._tasks)
