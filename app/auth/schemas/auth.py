from pydantic import BaseModel, EmailStr, Field

from app.auth.models.user import UserType
from app.auth.schemas.user import UserResponse


class RegisterRequest(BaseModel):
    """Registration payload. Admin accounts cannot be self-registered."""

    username: str = Field(min_length=1, max_length=100)
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    password: str
    user_type: UserType = UserType.ATTENDEE


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class LoginResponse(BaseModel):
    """
    Returned after a successful login.
    Tokens are also set as httpOnly cookies; the body copy serves
    clients that send ``Authorization: Bearer`` instead.
    """

    user: UserResponse
    access_token: str
    token_type: str = "bearer"


class RefreshResponse(BaseModel):
    message: str = "Token refreshed"


class MessageResponse(BaseModel):
    message: str


class PasswordResetRequest(BaseModel):
    email: EmailStr


class PasswordResetConfirm(BaseModel):
    token: str
    new_password: str
