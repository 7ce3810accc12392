import logging
import uuid
from datetime import date
from sqlalchemy.orm import Session

from tourbook.core.errors import CapacityExceeded, MissingField, NotFound, ValidationError
from tourbook.models.booking import Booking, BOOKING_PENDING
from tourbook.models.destination import Destination
from tourbook.models.payment import Payment
from tourbook.models.tour_package import TourPackage
from tourbook.models.user import User
from tourbook.schemas.booking import BookingOut

logger = logging.getLogger(__name__)


def create_booking(db: Session, user_id: str, package_id: str | None, travel_date: date | None,
                   number_of_people: int | None) -> Booking:
    """Reserve a pending booking and its pending payment.

    Only the package's static ``max_participants`` is checked; seats already
    held by other bookings for the same date are not.
    """
    if not package_id or not travel_date or not number_of_people:
        raise MissingField()
    if number_of_people < 1:
        raise ValidationError("number_of_people must be >= 1")

    pkg = db.get(TourPackage, package_id)
    if not pkg:
        raise NotFound("Package not found.")

    if number_of_people > pkg.max_participants:
        raise CapacityExceeded(pkg.max_participants)

    total_amount = int(pkg.price * number_of_people)

    booking = Booking(
        id=str(uuid.uuid4()),
        user_id=user_id,
        package_id=pkg.id,
        travel_date=travel_date,
        number_of_people=number_of_people,
        total_amount=total_amount,
        status=BOOKING_PENDING,
    )
    db.add(booking)
    db.flush()

    db.add(Payment(
        id=str(uuid.uuid4()),
        booking_id=booking.id,
        amount=total_amount,
        status="pending",
    ))

    db.commit()
    db.refresh(booking)
    logger.info("Booking %s created: package=%s people=%s total=%s", booking.id, pkg.id, number_of_people, total_amount)
    return booking


def _booking_query(db: Session):
    return (
        db.query(Booking, TourPackage, Destination, User)
        .join(TourPackage, TourPackage.id == Booking.package_id)
        .join(Destination, Destination.id == TourPackage.destination_id)
        .join(User, User.id == Booking.user_id)
    )


def to_booking_out(b: Booking, pkg: TourPackage | None = None, dest: Destination | None = None,
                   user: User | None = None) -> BookingOut:
    return BookingOut(
        id=b.id,
        userId=b.user_id,
        packageId=b.package_id,
        packageName=pkg.name if pkg else None,
        packagePrice=pkg.price if pkg else None,
        destinationName=dest.name if dest else None,
        country=dest.country if dest else None,
        userName=user.full_name if user else None,
        userEmail=user.email if user else None,
        travelDate=b.travel_date,
        numberOfPeople=b.number_of_people,
        totalAmount=b.total_amount,
        status=b.status,
        bookingDate=b.booking_date,
        paymentDate=b.payment_date,
        cardLastFour=b.card_last_four,
    )


def get_user_booking(db: Session, booking_id: str, user_id: str, status: str | None = None) -> BookingOut | None:
    """The caller's own booking (optionally in a given status), or None."""
    q = _booking_query(db).filter(Booking.id == booking_id, Booking.user_id == user_id)
    if status:
        q = q.filter(Booking.status == status)
    row = q.first()
    return to_booking_out(*row) if row else None


def list_user_bookings(db: Session, user_id: str) -> list[BookingOut]:
    rows = _booking_query(db).filter(Booking.user_id == user_id).order_by(Booking.booking_date.desc()).all()
    return [to_booking_out(*r) for r in rows]


def list_all_bookings(db: Session) -> list[BookingOut]:
    rows = db.query(Booking).order_by(Booking.booking_date.desc()).all()
    return [to_booking_out(b) for b in rows]
