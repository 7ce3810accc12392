"""Shared builders for the test suite: an in-memory database and row factories."""
import uuid
from datetime import date, timedelta

from fastapi.testclient import TestClient

from tourbook.core.security import hash_password
from tourbook.db.session import Database
from tourbook.main import create_app
from tourbook.models.booking import Booking
from tourbook.models.destination import Destination
from tourbook.models.tour_package import TourPackage
from tourbook.models.user import User

DEFAULT_PASSWORD = "secret123"


def make_database() -> Database:
    database = Database("sqlite://")
    database.create_all()
    return database


def make_client(database: Database) -> TestClient:
    return TestClient(create_app(database=database), follow_redirects=False)


def future(days: int = 30) -> date:
    return date.today() + timedelta(days=days)


def add_user(db, email="traveller@example.com", role="user", name="Traveller", password=DEFAULT_PASSWORD) -> User:
    u = User(
        id=str(uuid.uuid4()),
        full_name=name,
        email=email,
        phone="9999999999",
        password_hash=hash_password(password),
        role=role,
    )
    db.add(u)
    db.commit()
    db.refresh(u)
    return u


def add_destination(db, name="Goa", country="India") -> Destination:
    d = Destination(id=str(uuid.uuid4()), name=name, country=country, description=f"{name} trips", image_url="")
    db.add(d)
    db.commit()
    db.refresh(d)
    return d


def add_package(db, destination, name="Goa Beach Escape", price=1000, max_participants=5, duration=3,
                status="active") -> TourPackage:
    p = TourPackage(
        id=str(uuid.uuid4()),
        destination_id=destination.id,
        name=name,
        description="",
        duration=duration,
        price=price,
        max_participants=max_participants,
        status=status,
    )
    db.add(p)
    db.commit()
    db.refresh(p)
    return p


def add_booking(db, user, package, people, travel_date=None, status="pending") -> Booking:
    b = Booking(
        id=str(uuid.uuid4()),
        user_id=user.id,
        package_id=package.id,
        travel_date=travel_date or future(),
        number_of_people=people,
        total_amount=package.price * people,
        status=status,
    )
    db.add(b)
    db.commit()
    db.refresh(b)
    return b


def login(client, email="traveller@example.com", password=DEFAULT_PASSWORD):
    return client.post("/login", json={"email": email, "password": password})
