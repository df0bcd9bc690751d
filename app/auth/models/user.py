import enum
import uuid
from datetime import UTC, datetime

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base


class UserType(str, enum.Enum):
    ADMIN = "admin"
    ORGANIZER = "organizer"
    ATTENDEE = "attendee"


class UserStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


class User(Base):
    """
    Platform account: admins, event organizers and attendees.

    Attributes:
        id: Unique UUID primary key
        email: Unique lower-cased email address
        username: Public handle chosen at registration
        hashed_password: Argon2 hashed password
        user_type: "admin", "organizer" or "attendee"
        status: Account status used by reporting ("active" users)
        is_active: Whether the account may log in
        password_reset_token: SHA-256 hashed password reset token (nullable)
        password_reset_token_expires: Expiry datetime for reset token (nullable)
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    username: Mapped[str] = mapped_column(String(100))
    name: Mapped[str] = mapped_column(String(255))
    hashed_password: Mapped[str] = mapped_column(String(255))

    user_type: Mapped[UserType] = mapped_column(
        Enum(UserType, values_callable=lambda obj: [e.value for e in obj]),
        default=UserType.ATTENDEE,
        index=True,
    )
    status: Mapped[UserStatus] = mapped_column(
        Enum(UserStatus, values_callable=lambda obj: [e.value for e in obj]),
        default=UserStatus.ACTIVE,
    )
    is_active: Mapped[bool] = mapped_column(default=True)

    # Profile
    phone: Mapped[str | None] = mapped_column(String(50), default=None)
    bio: Mapped[str | None] = mapped_column(default=None)
    avatar_url: Mapped[str | None] = mapped_column(default=None)

    # Password reset
    password_reset_token: Mapped[str | None] = mapped_column(
        String(255), default=None, index=True
    )
    password_reset_token_expires: Mapped[datetime | None] = mapped_column(default=None)

    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, user_type={self.user_type.value})>"
