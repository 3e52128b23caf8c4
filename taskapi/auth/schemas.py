"""
Task Manager API - Authentication Schemas

Pydantic models for authentication requests.
"""

from pydantic import BaseModel, Field, field_validator


class UserRegisterRequest(BaseModel):
    """Request schema for user registration."""

    username: str = Field(
        ...,
        min_length=3,
        max_length=50,
        pattern=r"^[a-zA-Z0-9_]+$",
        examples=["john_doe"],
    )
    password: str = Field(..., min_length=8, max_length=72, examples=["password123"])

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        # bcrypt only accepts 72 bytes of input
        if len(value.encode("utf-8")) > 72:
            raise ValueError("Password must be at most 72 bytes")
        return value


class UserLoginRequest(BaseModel):
    """Request schema for user login."""

    username: str = Field(..., examples=["john_doe"])
    password: str = Field(..., examples=["password123"])
