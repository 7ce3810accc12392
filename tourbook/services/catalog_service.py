from datetime import date
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from tourbook.core.errors import NotFound
from tourbook.models.booking import Booking, ACTIVE_BOOKING_STATUSES
from tourbook.models.destination import Destination
from tourbook.models.review import Review
from tourbook.models.tour_package import TourPackage
from tourbook.models.user import User
from tourbook.schemas.catalog import DestinationView, PackageDetail, PackageOut, PackageView, ReviewOut

DEFAULT_SORT = "price"
SORT_KEYS = ("price", "duration", "seats", "price_asc")
FILTER_AVAILABLE = "available"


def booked_seats_subquery(today: date):
    """Seats held on a package by pending/confirmed bookings travelling today or later."""
    return (
        select(func.coalesce(func.sum(Booking.number_of_people), 0))
        .where(
            Booking.package_id == TourPackage.id,
            Booking.status.in_(ACTIVE_BOOKING_STATUSES),
            Booking.travel_date >= today,
        )
        .correlate(TourPackage)
        .scalar_subquery()
    )


def available_seats(max_participants: int, booked: int | None) -> int:
    return max(0, int(max_participants) - int(booked or 0))


def _sort_views(items: list[PackageView], sort: str) -> list[PackageView]:
    # stable sorts: name order survives as the tie-break
    items = sorted(items, key=lambda p: p.name.lower())
    if sort == "duration":
        return sorted(items, key=lambda p: p.duration, reverse=True)
    if sort == "seats":
        return sorted(items, key=lambda p: p.availableSeats, reverse=True)
    if sort == "price_asc":
        return sorted(items, key=lambda p: p.price)
    return sorted(items, key=lambda p: p.price, reverse=True)


def list_available_packages(db: Session, sort: str = DEFAULT_SORT, available_only: bool = False,
                            today: date | None = None) -> list[PackageView]:
    today = today or date.today()
    if sort not in SORT_KEYS:
        sort = DEFAULT_SORT

    booked = booked_seats_subquery(today).label("booked")
    rows = (
        db.query(TourPackage, Destination, booked)
        .outerjoin(Destination, Destination.id == TourPackage.destination_id)
        .filter(TourPackage.status == "active")
        .all()
    )

    items = []
    for pkg, dest, booked_count in rows:
        seats = available_seats(pkg.max_participants, booked_count)
        if available_only and seats <= 0:
            continue
        items.append(PackageView(
            id=pkg.id,
            name=pkg.name,
            description=pkg.description or "",
            duration=pkg.duration,
            price=pkg.price,
            maxParticipants=pkg.max_participants,
            status=pkg.status,
            imageUrl=pkg.image_url or "",
            destinationId=pkg.destination_id,
            destinationName=dest.name if dest else None,
            country=dest.country if dest else None,
            destinationDescription=dest.description if dest else None,
            destinationImage=dest.image_url if dest else None,
            availableSeats=seats,
        ))
    return _sort_views(items, sort)


def list_destinations_with_availability(db: Session, today: date | None = None) -> list[DestinationView]:
    """Destinations that have active packages with seats left, with count, min price and total seats."""
    today = today or date.today()
    booked = booked_seats_subquery(today).label("booked")
    rows = (
        db.query(TourPackage.destination_id, TourPackage.price, TourPackage.max_participants, booked)
        .filter(TourPackage.status == "active")
        .all()
    )

    stats: dict[str, dict] = {}
    for destination_id, price, max_participants, booked_count in rows:
        s = stats.setdefault(destination_id, {"count": 0, "min_price": None, "seats": 0})
        s["count"] += 1
        s["min_price"] = price if s["min_price"] is None else min(s["min_price"], price)
        s["seats"] += available_seats(max_participants, booked_count)

    if not stats:
        return []

    out = []
    for d in db.query(Destination).filter(Destination.id.in_(list(stats))).order_by(Destination.name.asc()).all():
        s = stats[d.id]
        if s["seats"] <= 0:
            continue
        out.append(DestinationView(
            id=d.id,
            name=d.name,
            country=d.country,
            description=d.description or "",
            imageUrl=d.image_url or "",
            isInternational=d.is_international,
            packageCount=s["count"],
            minPrice=s["min_price"],
            availableSeats=s["seats"],
        ))
    return out


def get_package_detail(db: Session, package_id: str) -> PackageDetail:
    row = (
        db.query(TourPackage, Destination)
        .join(Destination, Destination.id == TourPackage.destination_id)
        .filter(TourPackage.id == package_id)
        .first()
    )
    if not row:
        raise NotFound("Package not found.")
    pkg, dest = row

    reviews = (
        db.query(Review, User.full_name)
        .join(User, User.id == Review.user_id)
        .filter(Review.package_id == package_id)
        .order_by(Review.created_at.desc())
        .all()
    )
    return PackageDetail(
        id=pkg.id,
        name=pkg.name,
        description=pkg.description or "",
        duration=pkg.duration,
        price=pkg.price,
        maxParticipants=pkg.max_participants,
        status=pkg.status,
        imageUrl=pkg.image_url or "",
        destinationId=dest.id,
        destinationName=dest.name,
        country=dest.country,
        isInternational=dest.is_international,
        reviews=[
            ReviewOut(
                id=r.id, userId=r.user_id, userName=user_name or "", packageId=r.package_id,
                packageName=pkg.name, rating=r.rating, comment=r.comment or "", createdAt=r.created_at,
            )
            for r, user_name in reviews
        ],
    )


def list_packages(db: Session) -> list[PackageOut]:
    """Every package with its destination, regardless of status."""
    rows = (
        db.query(TourPackage, Destination)
        .join(Destination, Destination.id == TourPackage.destination_id)
        .order_by(TourPackage.name.asc())
        .all()
    )
    return [
        PackageOut(
            id=p.id,
            name=p.name,
            description=p.description,
            duration=p.duration,
            price=p.price,
            maxParticipants=p.max_participants,
            status=p.status,
            imageUrl=p.image_url,
            destinationId=d.id,
            destinationName=d.name,
            country=d.country,
        )
        for p, d in rows
    ]
