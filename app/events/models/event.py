import enum
import uuid
from datetime import UTC, datetime

from sqlalchemy import Enum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base


class EventStatus(str, enum.Enum):
    DRAFT = "draft"
    PENDING = "pending"
    ACTIVE = "active"
    SUSPENDED = "suspended"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Event(Base):
    __tablename__ = "events"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4, index=True)
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(default="")
    date: Mapped[datetime | None] = mapped_column(default=None, index=True)
    location: Mapped[str] = mapped_column(String(255), default="")
    city: Mapped[str] = mapped_column(String(120), default="")
    category: Mapped[str | None] = mapped_column(String(100), default=None, index=True)

    organizer: Mapped[str] = mapped_column(String(255), default="")
    organizer_email: Mapped[str | None] = mapped_column(String(255), default=None)
    organizer_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), index=True, default=None
    )

    total_tickets: Mapped[int] = mapped_column(default=0)
    ticket_price: Mapped[float] = mapped_column(default=0.0)
    tickets_sold: Mapped[int] = mapped_column(default=0)
    revenue: Mapped[float] = mapped_column(default=0.0)

    status: Mapped[EventStatus] = mapped_column(
        Enum(EventStatus, values_callable=lambda obj: [e.value for e in obj]),
        default=EventStatus.PENDING,
        index=True,
    )
    image_url: Mapped[str | None] = mapped_column(default=None)

    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )

    tickets = relationship("Ticket", back_populates="event", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, title={self.title}, status={self.status.value})>"
