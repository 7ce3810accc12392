from sqlalchemy import String, Integer, Date, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from datetime import date, datetime, timezone
from tourbook.db.session import Base

BOOKING_PENDING = "pending"
BOOKING_CONFIRMED = "confirmed"
BOOKING_CANCELLED = "cancelled"

# bookings that hold seats
ACTIVE_BOOKING_STATUSES = (BOOKING_PENDING, BOOKING_CONFIRMED)

class Booking(Base):
    __tablename__ = "bookings"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(36), ForeignKey("users.id"), index=True)
    package_id: Mapped[str] = mapped_column(String(36), ForeignKey("tour_packages.id"), index=True)

    travel_date: Mapped[date] = mapped_column(Date, index=True)
    number_of_people: Mapped[int] = mapped_column(Integer)
    total_amount: Mapped[int] = mapped_column(Integer)  # price * people, fixed at creation

    status: Mapped[str] = mapped_column(String(20), default=BOOKING_PENDING, index=True)  # pending, confirmed, cancelled
    booking_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    payment_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    card_last_four: Mapped[str | None] = mapped_column(String(4), nullable=True)
