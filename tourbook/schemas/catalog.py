from datetime import datetime
from pydantic import BaseModel
from typing import List, Optional


class PackageView(BaseModel):
    """One row of the tours listing, with derived seat availability."""
    id: str
    name: str
    description: str = ""
    duration: int
    price: int
    maxParticipants: int
    status: str
    imageUrl: str = ""
    destinationId: str
    destinationName: Optional[str] = None
    country: Optional[str] = None
    destinationDescription: Optional[str] = None
    destinationImage: Optional[str] = None
    availableSeats: int


class DestinationView(BaseModel):
    id: str
    name: str
    country: str
    description: str = ""
    imageUrl: str = ""
    isInternational: bool
    packageCount: int
    minPrice: int
    availableSeats: int


class ReviewOut(BaseModel):
    id: str
    userId: str
    userName: str = ""
    packageId: str
    packageName: Optional[str] = None
    rating: int
    comment: str = ""
    createdAt: datetime


class PackageDetail(BaseModel):
    id: str
    name: str
    description: str = ""
    duration: int
    price: int
    maxParticipants: int
    status: str
    imageUrl: str = ""
    destinationId: str
    destinationName: str
    country: str
    isInternational: bool
    reviews: List[ReviewOut] = []


class PackageOut(BaseModel):
    """A package with its destination, whatever its status."""
    id: str
    name: str
    description: Optional[str] = None
    duration: int
    price: int
    maxParticipants: int
    status: str
    imageUrl: Optional[str] = None
    destinationId: str
    destinationName: str
    country: str


class PackageList(BaseModel):
    total: int
    items: List[PackageOut]
