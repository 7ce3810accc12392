from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tourbook.db.session import get_db
from tourbook.api.deps import Identity, require_admin
from tourbook.services.booking_service import list_all_bookings
from tourbook.schemas.catalog import PackageList
from tourbook.services.catalog_service import list_packages

router = APIRouter(tags=["admin"])

@router.get("/admin/dashboard")
def admin_dashboard(db: Session = Depends(get_db), me: Identity = Depends(require_admin)):
    bookings = list_all_bookings(db)
    return {"total": len(bookings), "items": [b.model_dump(mode="json") for b in bookings]}

@router.get("/admin/packages", response_model=PackageList)
def admin_packages(db: Session = Depends(get_db), me: Identity = Depends(require_admin)):
    items = list_packages(db)
    return PackageList(total=len(items), items=items)
