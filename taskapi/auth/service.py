import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import jwt, JWTError
from pymongo.errors import DuplicateKeyError

from taskapi.config import settings
from taskapi.auth.models import SessionClaims, User
from taskapi.auth.repository import UserRepositoryInterface

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    password_bytes = password.encode("utf-8")
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(password_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    password_bytes = plain_password.encode("utf-8")
    hashed_bytes = hashed_password.encode("utf-8")
    try:
        return bcrypt.checkpw(password_bytes, hashed_bytes)
    except ValueError:
        # Over-long input or a malformed stored hash never matches
        return False


# Checked against when the username is unknown, so both login failures cost a bcrypt round
_DUMMY_PASSWORD_HASH = hash_password("not-a-real-password")


def create_access_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed JWT access token for the user."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)

    now = datetime.now(timezone.utc)
    to_encode = {
        "sub": user_id,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(
        to_encode,
        settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_token(token: str) -> Optional[SessionClaims]:
    """Verify signature and expiry of a JWT. Returns the claims if valid."""
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
        )
    except JWTError:
        return None

    subject = payload.get("sub")
    if subject is None or "exp" not in payload:
        return None
    return SessionClaims(
        subject=subject,
        issued_at=datetime.fromtimestamp(payload.get("iat", 0), tz=timezone.utc),
        expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
    )


class AuthService:
    """Registration and login on top of a user repository."""

    def __init__(self, repository: UserRepositoryInterface):
        self.repository = repository

    async def register_user(self, username: str, password: str) -> Optional[User]:
        """Register a new user. Returns None if username exists."""
        if await self.repository.exists_by_username(username):
            return None

        user = User.create(username=username, password_hash=hash_password(password))
        try:
            return await self.repository.create(user)
        except DuplicateKeyError:
            # Lost a race with a concurrent registration of the same name
            return None

    async def authenticate_user(self, username: str, password: str) -> Optional[User]:
        """Authenticate user by username and password."""
        user = await self.repository.get_by_username(username)
        password_hash = user.password_hash if user is not None else _DUMMY_PASSWORD_HASH
        if not verify_password(password, password_hash) or user is None:
            logger.info("Failed login attempt")
            return None
        return user

    def issue_token(self, user: User, expires_delta: Optional[timedelta] = None) -> str:
        """Issue a session token whose subject is the user's id."""
        return create_access_token(user.id, expires_delta)
