"""
Task Manager API - Task Router

CRUD endpoints for task management.
All endpoints are protected by the bearer-token gate.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from taskapi.database import get_database
from taskapi.auth.dependencies import CurrentClaims, require_token
from taskapi.errors import NotFoundError
from taskapi.tasks.service import TaskService
from taskapi.tasks.repository import TaskRepository, TaskRepositoryInterface
from taskapi.tasks.schemas import (
    TaskCreateRequest,
    TaskUpdateRequest,
    TaskResponse,
    TaskPageResponse,
)

TASK_NOT_FOUND = "Task not found"
MAX_PAGE_SIZE = 100

_not_found = {404: {"description": TASK_NOT_FOUND}}
_auth_failures = {
    400: {"description": "Malformed or invalid token, or invalid input"},
    401: {"description": "No token provided"},
    500: {"description": "Internal server error"},
}


router = APIRouter(
    prefix="/api/tasks",
    tags=["Tasks"],
    dependencies=[Depends(require_token)],
    responses=_auth_failures,
)


async def get_task_repository(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]
) -> TaskRepositoryInterface:
    """Dependency to get task repository instance."""
    return TaskRepository(db)


async def get_task_service(
    repository: Annotated[TaskRepositoryInterface, Depends(get_task_repository)]
) -> TaskService:
    """Dependency to get task service instance."""
    return TaskService(repository)


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
)
async def create_task(
    request: TaskCreateRequest,
    claims: CurrentClaims,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    """Add a new task with a title and an optional description."""
    return await service.create_task(request, actor=claims.subject)


@router.get(
    "",
    response_model=TaskPageResponse,
    summary="List tasks",
)
async def list_tasks(
    service: Annotated[TaskService, Depends(get_task_service)],
    page: int = Query(default=1, ge=1, description="Page number for pagination"),
    limit: int = Query(default=10, ge=1, le=MAX_PAGE_SIZE, description="Number of tasks per page"),
) -> TaskPageResponse:
    """Get one page of tasks, ordered by creation time."""
    return await service.list_tasks(page=page, limit=limit)


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Get a task by ID",
    responses=_not_found,
)
async def get_task(
    task_id: str,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    task = await service.get_task(task_id)
    if task is None:
        raise NotFoundError(TASK_NOT_FOUND)
    return task


@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Update a task",
    responses=_not_found,
)
async def update_task(
    task_id: str,
    request: TaskUpdateRequest,
    claims: CurrentClaims,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    """
    Modify the title, description, or completion status of a task.

    Only provided fields are updated; unknown fields are rejected.
    """
    task = await service.update_task(task_id, request, actor=claims.subject)
    if task is None:
        raise NotFoundError(TASK_NOT_FOUND)
    return task


@router.delete(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Delete a task",
    responses=_not_found,
)
async def delete_task(
    task_id: str,
    claims: CurrentClaims,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    """Remove a task and return the record as it was before deletion."""
    task = await service.delete_task(task_id, actor=claims.subject)
    if task is None:
        raise NotFoundError(TASK_NOT_FOUND)
    return task
