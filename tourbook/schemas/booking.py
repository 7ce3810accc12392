from datetime import date, datetime
from pydantic import BaseModel
from typing import Optional, Union

class BookingCreate(BaseModel):
    # optional so the booking workflow reports missing fields itself
    package_id: Optional[str] = None
    travel_date: Optional[date] = None
    number_of_people: Optional[int] = None

class PaymentSubmit(BaseModel):
    booking_id: Optional[str] = None
    # forms may send the card number as a bare number
    card_number: Optional[Union[str, int]] = None
    # accepted from the payment form but never stored
    card_name: Optional[str] = None
    expiry: Optional[str] = None
    cvv: Optional[str] = None

class BookingOut(BaseModel):
    id: str
    userId: str
    packageId: str
    packageName: Optional[str] = None
    packagePrice: Optional[int] = None
    destinationName: Optional[str] = None
    country: Optional[str] = None
    userName: Optional[str] = None
    userEmail: Optional[str] = None
    travelDate: date
    numberOfPeople: int
    totalAmount: int
    status: str
    bookingDate: datetime
    paymentDate: Optional[datetime] = None
    cardLastFour: Optional[str] = None
