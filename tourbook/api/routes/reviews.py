from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session
from tourbook.db.session import get_db
from tourbook.schemas.catalog import ReviewOut
from tourbook.schemas.review import ReviewCreate
from tourbook.services.review_service import list_reviews, submit_review
from tourbook.api.deps import Identity, require_authenticated

router = APIRouter(tags=["reviews"])


@router.get("/reviews", response_model=list[ReviewOut])
def reviews(db: Session = Depends(get_db)):
    return list_reviews(db)


@router.post("/submit-review")
def create_review(body: ReviewCreate, db: Session = Depends(get_db), me: Identity = Depends(require_authenticated)):
    review = submit_review(db, me.id, body.package_id, body.rating, body.comment)
    return RedirectResponse(url=f"/package/{review.package_id}", status_code=303)
