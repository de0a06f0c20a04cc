"""
Authentication utilities
Password hashing, signed tokens and the seeded administrator
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import logging

import jwt
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import (
    SECRET_KEY,
    JWT_ALGORITHM,
    ACCESS_TOKEN_EXPIRE_HOURS,
    ADMIN_USERNAME,
    ADMIN_PASSWORD,
)
from app.apps.authentication.models import User

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class InvalidTokenError(Exception):
    """Raised when a token fails signature or expiry verification."""


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Malformed stored hash
        logger.warning("Stored password hash could not be parsed")
        return False


def create_access_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    """
    Issue a signed token for a user.

    Claims: userId, username, iat and exp (24 hours by default).
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(hours=ACCESS_TOKEN_EXPIRE_HOURS))
    payload = {
        "userId": user.id,
        "username": user.username,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(payload, SECRET_KEY, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    """Verify signature and expiry and return the claims."""
    try:
        return jwt.decode(token, SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError as e:
        raise InvalidTokenError("Token has expired") from e
    except jwt.PyJWTError as e:
        raise InvalidTokenError(str(e)) from e


async def authenticate_user(session: AsyncSession, username: str, password: str) -> Optional[User]:
    """Return the user when the credentials match, None otherwise."""
    result = await session.execute(select(User).where(User.username == username))
    user = result.scalar_one_or_none()
    if user is None:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


async def seed_admin_user(session: AsyncSession) -> Optional[User]:
    """
    Create the administrator account if it does not exist yet.

    Returns the created user, or None when it was already present.
    """
    result = await session.execute(select(User).where(User.username == ADMIN_USERNAME))
    if result.scalar_one_or_none() is not None:
        return None

    user = User(username=ADMIN_USERNAME, password_hash=hash_password(ADMIN_PASSWORD))
    session.add(user)
    await session.commit()
    logger.info(f"Admin user created (username: {ADMIN_USERNAME})")
    return user
