"""
Authentication router for the Skill Sphere backend.

Handles user registration, login, and the current-user lookup.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from skillsphere.core.database import get_db
from skillsphere.core.exceptions import InvalidToken
from skillsphere.models.user import User
from skillsphere.schemas.auth import (
    LoginResponse,
    MessageResponse,
    UserLogin,
    UserRegister,
    UserResponse
)
from skillsphere.services.auth import AuthService
from skillsphere.services.credential_store import CredentialStore


router = APIRouter()

# Bearer scheme for token authentication; errors are raised by us
bearer_scheme = HTTPBearer(auto_error=False)


# Dependencies
def get_auth_service(
    request: Request,
    db: Session = Depends(get_db)
) -> AuthService:
    """
    Build the auth service for this request's database session.
    """
    return AuthService(
        store=CredentialStore(db),
        hasher=request.app.state.password_hasher,
        token_issuer=request.app.state.token_issuer,
    )


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service)
) -> User:
    """
    Get current authenticated user from the Bearer token.
    """
    if credentials is None:
        raise InvalidToken(details="Missing bearer token")
    return auth_service.resolve_user(credentials.credentials)


# Endpoints
@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    auth_service: AuthService = Depends(get_auth_service)
) -> MessageResponse:
    """
    Register a new user.
    """
    auth_service.register(user_data.username, user_data.email, user_data.password)
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: UserLogin,
    auth_service: AuthService = Depends(get_auth_service)
) -> LoginResponse:
    """
    Exchange email and password for an access token.
    """
    result = auth_service.login(credentials.email, credentials.password)
    return LoginResponse(token=result.token, username=result.user.username)


@router.get("/me", response_model=UserResponse)
def get_current_user_info(
    current_user: User = Depends(get_current_user)
) -> User:
    """
    Get current user information.
    """
    return current_user
