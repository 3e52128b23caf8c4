"""
Task Manager API - Authentication Module

Register/login with bcrypt password hashing and JWT bearer tokens.
"""

from taskapi.auth.router import router as auth_router

__all__ = ["auth_router"]
