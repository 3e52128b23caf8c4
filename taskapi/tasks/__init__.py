"""
Task Manager API - Tasks Module

CRUD and pagination for task records, behind the bearer-token gate.
"""

from taskapi.tasks.router import router as tasks_router

__all__ = ["tasks_router"]
