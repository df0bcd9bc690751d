import enum
import uuid
from datetime import UTC, datetime

from sqlalchemy import Enum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base


class TicketStatus(str, enum.Enum):
    VALID = "valid"
    USED = "used"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"


class Ticket(Base):
    __tablename__ = "tickets"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4, index=True)
    ticket_number: Mapped[str] = mapped_column(String(64), unique=True, index=True)

    event_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("events.id", ondelete="CASCADE"), index=True
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )

    quantity: Mapped[int] = mapped_column(default=1)
    unit_price: Mapped[float] = mapped_column(default=0.0)
    total_amount: Mapped[float] = mapped_column(default=0.0)

    status: Mapped[TicketStatus] = mapped_column(
        Enum(TicketStatus, values_callable=lambda obj: [e.value for e in obj]),
        default=TicketStatus.VALID,
    )
    payment_method: Mapped[str | None] = mapped_column(String(50), default=None)
    payment_status: Mapped[str | None] = mapped_column(String(50), default=None)

    purchase_date: Mapped[datetime | None] = mapped_column(default=lambda: datetime.now(UTC))
    check_in_time: Mapped[datetime | None] = mapped_column(default=None)

    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )

    event = relationship("Event", back_populates="tickets")

    def __repr__(self) -> str:
        return f"<Ticket(id={self.id}, number={self.ticket_number}, event_id={self.event_id})>"
