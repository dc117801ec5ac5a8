"""
Security utilities for the Skill Sphere backend.

Handles password hashing and JWT token creation/verification. Both
components take their configuration at construction so the application
factory (and tests) decide the work factor and signing key.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError
from passlib.context import CryptContext

from .config import Settings
from .exceptions import InvalidToken, TokenExpired


logger = logging.getLogger(__name__)

# passlib refuses longer secrets
MAX_PASSWORD_BYTES = 4096


def is_hashable_password(password: str) -> bool:
    """Whether bcrypt (through passlib) accepts ``password`` for hashing."""
    return "\x00" not in password and len(password.encode("utf-8")) <= MAX_PASSWORD_BYTES


class PasswordHasher:
    """
    One-way salted password hashing backed by bcrypt.
    """

    def __init__(self, rounds: int = 10):
        self.rounds = rounds
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        """
        Hash a password using bcrypt.

        A fresh salt is drawn on every call, so hashing the same password
        twice gives two different values.

        Args:
            password: The plain text password to hash

        Returns:
            str: The hashed password
        """
        return self._context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain password against a hashed password.

        Args:
            plain_password: The plain text password to verify
            hashed_password: The hashed password to compare against

        Returns:
            bool: True if password matches, False otherwise (including when
            the stored hash is malformed)
        """
        try:
            return self._context.verify(plain_password, hashed_password)
        except (ValueError, TypeError) as e:
            logger.warning(f"Password verification failed on unusable hash: {e}")
            return False

    def dummy_verify(self) -> bool:
        """Spend the time of a real verification against no hash."""
        return self._context.dummy_verify()


class TokenIssuer:
    """
    Signs and verifies time-bounded identity tokens (JWT).
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_minutes: int = 60,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def issue(
        self,
        user_id: int | str,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """
        Create a JWT access token for a user.

        Args:
            user_id: Identifier of the authenticated user
            expires_delta: Optional custom expiration time

        Returns:
            str: The encoded JWT token
        """
        now = datetime.now(timezone.utc)
        if expires_delta is None:
            expires_delta = timedelta(minutes=self.expire_minutes)

        to_encode = {
            "sub": str(user_id),
            "userId": str(user_id),
            "iat": now,
            "exp": now + expires_delta,
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a JWT token.

        Raises:
            TokenExpired: The token signature is valid but its time is up
            InvalidToken: Anything else is wrong with the token
        """
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            raise TokenExpired()
        except JWTError as e:
            raise InvalidToken(details=str(e))

    def verify(self, token: str) -> str:
        """
        Verify a token and return the user id it was issued for.
        """
        payload = self.decode(token)
        user_id = payload.get("sub")
        if not user_id:
            raise InvalidToken(details="Token has no subject")
        return user_id


def build_password_hasher(settings: Settings) -> PasswordHasher:
    return PasswordHasher(rounds=settings.BCRYPT_ROUNDS)


def build_token_issuer(settings: Settings) -> TokenIssuer:
    return TokenIssuer(
        secret_key=settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
    )
