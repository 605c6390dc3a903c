"""Request and response models for the account API.

Wire names are camelCase (userName, totalUsers); Python attributes are
snake_case and mapped through aliases.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from domain.model.user import User


class RegisterRequest(BaseModel):
    """Request model for user registration."""
    model_config = ConfigDict(populate_by_name=True)

    user_name: Optional[str] = Field(default=None, alias="userName")
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    """Request model for user login."""
    email: Optional[str] = None
    password: Optional[str] = None


class LogoutRequest(BaseModel):
    """Request model for user logout."""
    email: Optional[str] = None


class PublicUser(BaseModel):
    """Public view of a user (no password hash)."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    email: str
    user_name: str = Field(alias="userName")

    @classmethod
    def from_domain(cls, user: User) -> "PublicUser":
        return cls(id=user.id, email=user.email, user_name=user.user_name)


class AuthResponse(BaseModel):
    """Response model for register and login."""
    message: str
    user: PublicUser


class MessageResponse(BaseModel):
    message: str


class TotalUsersResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_users: int = Field(alias="totalUsers")


class OnlineUsersResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    online_users: int = Field(alias="onlineUsers")
