"""
Authentication schemas.

Request fields are optional at the schema level; presence is checked by
``skillsphere.services.auth`` so a missing field gets the same 400 body
as an empty one.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class UserRegister(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserLogin(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class MessageResponse(BaseModel):
    message: str


class LoginResponse(BaseModel):
    token: str
    username: str


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
