"""
Task Manager API - Task Service

Business logic for task operations: creation, pagination and partial updates.
"""

import logging
import math
from typing import Optional

from taskapi.tasks.models import Task
from taskapi.tasks.repository import TaskRepositoryInterface
from taskapi.tasks.schemas import (
    TaskCreateRequest,
    TaskUpdateRequest,
    TaskResponse,
    TaskPageResponse,
)

logger = logging.getLogger(__name__)


class TaskService:
    """Service layer for task business logic."""

    def __init__(self, repository: TaskRepositoryInterface):
        self.repository = repository

    @staticmethod
    def _task_to_response(task: Task) -> TaskResponse:
        return TaskResponse(
            id=task.id,
            title=task.title,
            description=task.description,
            completed=task.completed,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )

    async def create_task(self, request: TaskCreateRequest, actor: Optional[str] = None) -> TaskResponse:
        """Create a new task. `actor` is the caller's user id, used for audit logging."""
        task = Task.create(title=request.title, description=request.description)
        await self.repository.create(task)
        logger.info(f"Created task {task.id} by user {actor}")
        return self._task_to_response(task)

    async def get_task(self, task_id: str) -> Optional[TaskResponse]:
        task = await self.repository.get_by_id(task_id)
        if task is None:
            return None
        return self._task_to_response(task)

    async def list_tasks(self, page: int, limit: int) -> TaskPageResponse:
        """
        Return one page of tasks.

        Args:
            page: 1-based page number
            limit: page size, must be positive
        """
        tasks = await self.repository.list_page(skip=(page - 1) * limit, limit=limit)
        total = await self.repository.count()
        return TaskPageResponse(
            tasks=[self._task_to_response(task) for task in tasks],
            current=page,
            total_page=math.ceil(total / limit),
        )

    async def update_task(
        self,
        task_id: str,
        request: TaskUpdateRequest,
        actor: Optional[str] = None,
    ) -> Optional[TaskResponse]:
        """Overwrite only the fields present in the request."""
        updates = request.model_dump(exclude_unset=True)

        if not updates:
            # No updates provided, just return current task
            return await self.get_task(task_id)

        task = await self.repository.update(task_id, updates)
        if task is None:
            return None
        logger.info(f"Updated task {task_id} by user {actor}: {sorted(updates)}")
        return self._task_to_response(task)

    async def delete_task(self, task_id: str, actor: Optional[str] = None) -> Optional[TaskResponse]:
        """Delete a task and return its former representation."""
        task = await self.repository.delete(task_id)
        if task is None:
            return None
        logger.info(f"Deleted task {task_id} by user {actor}")
        return self._task_to_response(task)
