from sqlalchemy import String, Integer, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from tourbook.db.session import Base

class TourPackage(Base):
    __tablename__ = "tour_packages"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    destination_id: Mapped[str] = mapped_column(String(36), ForeignKey("destinations.id"), index=True)
    name: Mapped[str] = mapped_column(String(200))
    description: Mapped[str] = mapped_column(Text, default="")
    duration: Mapped[int] = mapped_column(Integer, default=1)  # days
    price: Mapped[int] = mapped_column(Integer)  # per person
    max_participants: Mapped[int] = mapped_column(Integer)
    status: Mapped[str] = mapped_column(String(20), default="active", index=True)  # active, inactive
    image_url: Mapped[str] = mapped_column(String(512), default="")
