import logging
from datetime import datetime, timezone
from sqlalchemy.orm import Session

from tourbook.core.errors import MissingField, NotFoundOrUnauthorized
from tourbook.models.booking import Booking, BOOKING_CONFIRMED, BOOKING_PENDING

logger = logging.getLogger(__name__)


def card_last_four(card_number: str) -> str:
    return "".join(card_number.split())[-4:]


def capture_payment(db: Session, booking_id: str | None, user_id: str, card_number: str | int | None) -> Booking:
    """Simulated capture: confirm the caller's pending booking.

    Only the last four digits of the card are kept; the full number is never
    stored or logged.
    """
    if not booking_id:
        raise MissingField()

    booking = (
        db.query(Booking)
        .filter(Booking.id == booking_id, Booking.user_id == user_id, Booking.status == BOOKING_PENDING)
        .first()
    )
    if not booking:
        raise NotFoundOrUnauthorized()

    card_number = "" if card_number is None else str(card_number)
    if not card_number.strip():
        raise MissingField()
    last_four = card_last_four(card_number)

    # no gateway: the capture always succeeds
    booking.status = BOOKING_CONFIRMED
    booking.payment_date = datetime.now(timezone.utc)
    booking.card_last_four = last_four
    db.commit()
    db.refresh(booking)
    logger.info("Payment captured for booking %s", booking.id)
    return booking
