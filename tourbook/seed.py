import logging
import uuid

from sqlalchemy.orm import Session
from sqlalchemy import text
from sqlalchemy.exc import OperationalError, ProgrammingError

from tourbook.core.config import settings
from tourbook.core.security import hash_password
from tourbook.db.session import Database
from tourbook.models.user import User
from tourbook.models.destination import Destination
from tourbook.models.tour_package import TourPackage

logger = logging.getLogger(__name__)

# (name, country, description, image_url, packages: (name, duration_days, price, max_participants))
DESTINATIONS = [
    ("Goa", "India", "Beaches, churches and seafood on the Konkan coast.", "/images/goa.jpg", [
        ("Goa Beach Escape", 4, 18000, 12),
        ("North Goa Weekend", 2, 9000, 8),
    ]),
    ("Kerala", "India", "Backwaters, tea estates and spice markets.", "/images/kerala.jpg", [
        ("Kerala Backwater Cruise", 5, 26000, 10),
    ]),
    ("Bali", "Indonesia", "Temples, rice terraces and surf beaches.", "/images/bali.jpg", [
        ("Bali Island Explorer", 7, 65000, 15),
    ]),
    ("Paris", "France", "Museums, cafes and the Seine.", "/images/paris.jpg", [
        ("Paris City Lights", 6, 120000, 20),
    ]),
]


def ensure_user(db: Session, email: str, password: str, role: str, name: str, phone: str = ""):
    u = db.query(User).filter(User.email == email).first()
    if u:
        return
    db.add(
        User(
            id=str(uuid.uuid4()),
            email=email,
            full_name=name,
            phone=phone,
            role=role,
            password_hash=hash_password(password),
        )
    )
    db.commit()


def ensure_destination(db: Session, name: str, country: str, description: str, image_url: str) -> Destination:
    d = db.query(Destination).filter(Destination.name == name, Destination.country == country).first()
    if d:
        return d
    d = Destination(id=str(uuid.uuid4()), name=name, country=country, description=description, image_url=image_url)
    db.add(d)
    db.flush()
    return d


def run(db: Session | None = None):
    database = None
    if db is None:
        database = Database.from_settings(settings).open()
        db = database.new_session()
    try:
        # If migrations haven't been applied yet, seeding must not crash the API.
        try:
            db.execute(text("SELECT 1 FROM users LIMIT 1"))
        except (ProgrammingError, OperationalError):
            db.rollback()
            logger.warning("users table not found yet. Skipping seeding (run alembic upgrade head).")
            return

        ensure_user(db, "admin@tourbook.local", "admin12345", "admin", "Admin")

        for name, country, description, image_url, packages in DESTINATIONS:
            dest = ensure_destination(db, name, country, description, image_url)
            for pkg_name, duration, price, max_participants in packages:
                exists = db.query(TourPackage).filter(TourPackage.name == pkg_name).first()
                if exists:
                    continue
                db.add(TourPackage(
                    id=str(uuid.uuid4()),
                    destination_id=dest.id,
                    name=pkg_name,
                    description=f"{duration} days in {name}.",
                    duration=duration,
                    price=price,
                    max_participants=max_participants,
                    status="active",
                ))
        db.commit()
        logger.info("Seed data applied")
    finally:
        db.close()
        if database is not None:
            database.close()


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    run()
