from pydantic import BaseModel
from typing import Optional, Union

class ReviewCreate(BaseModel):
    package_id: Optional[str] = None
    # form posts send the rating as text; the review service parses it
    rating: Optional[Union[int, float, str]] = None
    comment: Optional[str] = None
