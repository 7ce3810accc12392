import logging
import uuid
from sqlalchemy.orm import Session

from tourbook.core.errors import DuplicateReview, InvalidRating, MissingField, NotFound
from tourbook.models.review import Review
from tourbook.models.tour_package import TourPackage
from tourbook.models.user import User
from tourbook.schemas.catalog import ReviewOut

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


def parse_rating(rating) -> int:
    if isinstance(rating, float):
        # whole-number floats only, 4.0 but not 4.5
        if not rating.is_integer():
            raise InvalidRating()
        rating = int(rating)
    try:
        value = int(str(rating).strip())
    except (TypeError, ValueError):
        raise InvalidRating()
    if value < MIN_RATING or value > MAX_RATING:
        raise InvalidRating()
    return value


def submit_review(db: Session, user_id: str, package_id: str | None, rating, comment: str | None) -> Review:
    """Append a review; a user may review each package once.

    The duplicate check is a read before the insert, there is no unique
    constraint behind it.
    """
    if not package_id or rating in (None, "") or not comment:
        raise MissingField()
    rating_value = parse_rating(rating)

    if not db.get(TourPackage, package_id):
        raise NotFound("Package not found.")

    existing = db.query(Review.id).filter(Review.user_id == user_id, Review.package_id == package_id).first()
    if existing:
        raise DuplicateReview()

    review = Review(
        id=str(uuid.uuid4()),
        user_id=user_id,
        package_id=package_id,
        rating=rating_value,
        comment=comment,
    )
    db.add(review)
    db.commit()
    logger.info("Review %s submitted for package %s", review.id, package_id)
    return review


def list_reviews(db: Session, limit: int | None = None) -> list[ReviewOut]:
    q = (
        db.query(Review, User.full_name, TourPackage.name)
        .join(User, User.id == Review.user_id)
        .join(TourPackage, TourPackage.id == Review.package_id)
        .order_by(Review.created_at.desc())
    )
    if limit:
        q = q.limit(limit)
    return [
        ReviewOut(
            id=r.id, userId=r.user_id, userName=user_name or "", packageId=r.package_id,
            packageName=package_name, rating=r.rating, comment=r.comment or "", createdAt=r.created_at,
        )
        for r, user_name, package_name in q.all()
    ]
