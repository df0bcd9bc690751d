from pydantic import BaseModel, ConfigDict, Field

from app.auth.models.user import UserStatus, UserType
from app.core.datetime_utils import UTCDatetime


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    username: str
    name: str
    user_type: UserType
    status: UserStatus
    is_active: bool
    phone: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    created_at: UTCDatetime | None = None

    @classmethod
    def from_user(cls, user) -> "UserResponse":
        return cls(
            id=str(user.id),
            email=user.email,
            username=user.username,
            name=user.name,
            user_type=user.user_type,
            status=user.status,
            is_active=user.is_active,
            phone=user.phone,
            bio=user.bio,
            avatar_url=user.avatar_url,
            created_at=user.created_at,
        )


class ProfileUpdate(BaseModel):
    """Fields a user may change on their own profile. Omitted fields are kept."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    username: str | None = Field(default=None, min_length=1, max_length=100)
    phone: str | None = Field(default=None, max_length=50)
    bio: str | None = None
    avatar_url: str | None = None
