from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session
from tourbook.db.session import get_db
from tourbook.core.errors import NotFound
from tourbook.schemas.booking import BookingCreate, BookingOut
from tourbook.services.booking_service import create_booking, get_user_booking, list_user_bookings
from tourbook.api.deps import Identity, require_authenticated

router = APIRouter(tags=["bookings"])


@router.post("/book-package")
def book_package(body: BookingCreate, db: Session = Depends(get_db), me: Identity = Depends(require_authenticated)):
    booking = create_booking(db, me.id, body.package_id, body.travel_date, body.number_of_people)
    return RedirectResponse(url=f"/payment/{booking.id}", status_code=303)


@router.get("/booking-confirmation/{booking_id}", response_model=BookingOut)
def booking_confirmation(booking_id: str, db: Session = Depends(get_db), me: Identity = Depends(require_authenticated)):
    b = get_user_booking(db, booking_id, me.id)
    if not b:
        raise NotFound("Booking not found.")
    return b


@router.get("/my-bookings", response_model=list[BookingOut])
def my_bookings(db: Session = Depends(get_db), me: Identity = Depends(require_authenticated)):
    return list_user_bookings(db, me.id)
