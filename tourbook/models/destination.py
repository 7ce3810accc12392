from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column
from tourbook.core.config import settings
from tourbook.db.session import Base

class Destination(Base):
    __tablename__ = "destinations"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(120))
    country: Mapped[str] = mapped_column(String(80), default="")
    description: Mapped[str] = mapped_column(Text, default="")
    image_url: Mapped[str] = mapped_column(String(512), default="")

    @property
    def is_international(self) -> bool:
        return (self.country or "").strip().lower() != settings.HOME_COUNTRY.strip().lower()
