"""
Registration and login flows.

Each flow is linear: validate the input, then hash/store or look up/verify/
issue. Failures raise from ``skillsphere.core.exceptions`` and are turned
into responses by the application's error handler.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from skillsphere.core.exceptions import AuthenticationError, InvalidToken, ValidationError
from skillsphere.core.security import (
    MAX_PASSWORD_BYTES,
    PasswordHasher,
    TokenIssuer,
    is_hashable_password
)
from skillsphere.models.user import User

from .credential_store import CredentialStore


logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


@dataclass
class LoginResult:
    token: str
    user: User


def validate_registration(
    username: Optional[str],
    email: Optional[str],
    password: Optional[str],
) -> None:
    if not username or not email or not password:
        raise ValidationError("All fields are required")
    if not is_hashable_password(password):
        raise ValidationError(
            "Invalid password",
            details=f"Password must be at most {MAX_PASSWORD_BYTES} bytes and must not contain NUL characters"
        )


def validate_login(email: Optional[str], password: Optional[str]) -> None:
    if not email or not password:
        raise ValidationError("Email and password are required")


class AuthService:
    """
    Credential lifecycle: registration, login, and token resolution.
    """

    def __init__(
        self,
        store: CredentialStore,
        hasher: PasswordHasher,
        token_issuer: TokenIssuer,
    ):
        self.store = store
        self.hasher = hasher
        self.token_issuer = token_issuer

    def register(
        self,
        username: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> User:
        """
        Register a new user.

        Raises:
            ValidationError: A field is missing or empty
            DuplicateKey: The email is already registered
        """
        validate_registration(username, email, password)

        password_hash = self.hasher.hash(password)
        user = self.store.create(username, email, password_hash)

        logger.info(f"Registered user {user.username} (id={user.id})")
        return user

    def login(self, email: Optional[str], password: Optional[str]) -> LoginResult:
        """
        Verify credentials and issue a token.

        An unknown email and a wrong password raise the same error.
        """
        validate_login(email, password)

        user = self.store.find_by_email(email)
        if user is None:
            # Same hashing cost as a real verification
            self.hasher.dummy_verify()
            logger.info("Failed login: unknown email")
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not self.hasher.verify(password, user.password_hash):
            logger.info(f"Failed login: wrong password for user id={user.id}")
            raise AuthenticationError(INVALID_CREDENTIALS)

        token = self.token_issuer.issue(user.id)
        logger.info(f"Login: {user.username} (id={user.id})")
        return LoginResult(token=token, user=user)

    def resolve_user(self, token: str) -> User:
        """
        Return the user a token was issued for.

        Raises:
            TokenExpired: The token is past its expiry
            InvalidToken: The token is unusable or its user is gone
        """
        subject = self.token_issuer.verify(token)
        try:
            user_id = int(subject)
        except ValueError:
            raise InvalidToken(details="Token subject is not a user id")

        user = self.store.get(user_id)
        if user is None:
            raise InvalidToken()
        return user
