import logging
from typing import Optional
from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from tourbook.db.session import get_db
from tourbook.models.user import User
from tourbook.schemas.catalog import DestinationView, PackageDetail, PackageList, PackageView
from tourbook.services.catalog_service import (
    DEFAULT_SORT, FILTER_AVAILABLE, get_package_detail, list_available_packages,
    list_destinations_with_availability, list_packages,
)
from tourbook.services.review_service import list_reviews
from tourbook.api.deps import Identity, require_authenticated
from tourbook.api.routes.auth import clear_session_cookie

logger = logging.getLogger(__name__)

router = APIRouter(tags=["catalog"])


@router.get("/")
def home(db: Session = Depends(get_db), me: Identity = Depends(require_authenticated)):
    user = db.get(User, me.id)
    if not user:
        response = RedirectResponse(url="/login", status_code=303)
        clear_session_cookie(response)
        return response
    try:
        recent = list_reviews(db, limit=3)
    except SQLAlchemyError:
        # the home page still renders without reviews
        logger.exception("Error fetching recent reviews")
        db.rollback()
        recent = []
    return {
        "user": {"id": user.id, "name": user.full_name, "email": user.email, "role": user.role},
        "recentReviews": [r.model_dump(mode="json") for r in recent],
    }


@router.get("/packages", response_model=PackageList)
def packages(db: Session = Depends(get_db), me: Identity = Depends(require_authenticated)):
    items = list_packages(db)
    return PackageList(total=len(items), items=items)


@router.get("/tours", response_model=list[PackageView])
def tours(sort: str = DEFAULT_SORT, filter: str = "all",
          db: Session = Depends(get_db), me: Identity = Depends(require_authenticated)):
    """Active packages with available seats; sort=price|duration|seats|price_asc, filter=all|available."""
    return list_available_packages(db, sort=sort, available_only=(filter == FILTER_AVAILABLE))


@router.get("/destination", response_model=list[DestinationView])
def destinations(db: Session = Depends(get_db), me: Identity = Depends(require_authenticated)):
    return list_destinations_with_availability(db)


@router.get("/package/{package_id}", response_model=PackageDetail)
def package_detail(package_id: str, db: Session = Depends(get_db), me: Identity = Depends(require_authenticated)):
    return get_package_detail(db, package_id)


@router.get("/booking")
def booking_form(package: Optional[str] = None,
                 db: Session = Depends(get_db), me: Identity = Depends(require_authenticated)):
    if not package:
        return RedirectResponse(url="/tours", status_code=303)
    detail = get_package_detail(db, package)
    return {"package": detail.model_dump(mode="json", exclude={"reviews"})}
