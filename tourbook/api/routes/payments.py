import logging
from typing import Any
from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import ValidationError as BodyValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from tourbook.db.session import get_db
from tourbook.core.errors import AppError, NotFoundOrUnauthorized
from tourbook.models.booking import BOOKING_CONFIRMED
from tourbook.schemas.booking import BookingOut, PaymentSubmit
from tourbook.services.booking_service import get_user_booking
from tourbook.services.payment_service import capture_payment
from tourbook.api.deps import Identity, require_authenticated

logger = logging.getLogger(__name__)

router = APIRouter(tags=["payments"])

PAYMENT_ERROR_MESSAGE = "An error occurred while processing your payment."


@router.get("/payment/{booking_id}", response_model=BookingOut)
def payment_page(booking_id: str, db: Session = Depends(get_db), me: Identity = Depends(require_authenticated)):
    b = get_user_booking(db, booking_id, me.id)
    if not b:
        raise NotFoundOrUnauthorized()
    return b


@router.post("/process-payment")
def process_payment(payload: Any = Body(None), db: Session = Depends(get_db),
                    me: Identity = Depends(require_authenticated)):
    # a malformed payment form ends on the payment error page like any other failure
    booking_id = payload.get("booking_id") if isinstance(payload, dict) else None
    try:
        body = PaymentSubmit.model_validate(payload or {})
        booking = capture_payment(db, body.booking_id, me.id, body.card_number)
    except (AppError, SQLAlchemyError, BodyValidationError) as e:
        db.rollback()
        logger.warning("Payment rejected for booking %s: %s", booking_id, e.__class__.__name__)
        return RedirectResponse(url="/payment-error", status_code=303)
    return RedirectResponse(url=f"/payment-success/{booking.id}", status_code=303)


@router.get("/payment-success/{booking_id}")
def payment_success(booking_id: str, db: Session = Depends(get_db), me: Identity = Depends(require_authenticated)):
    b = get_user_booking(db, booking_id, me.id, status=BOOKING_CONFIRMED)
    if not b:
        return RedirectResponse(url="/payment-error", status_code=303)
    return {"booking": b.model_dump(mode="json")}


@router.get("/payment-error")
def payment_error():
    return JSONResponse(status_code=400, content={"detail": PAYMENT_ERROR_MESSAGE})
