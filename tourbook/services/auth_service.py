import logging
import uuid
from sqlalchemy.orm import Session

from tourbook.core.errors import DuplicateEmail, MissingField, Unauthorized
from tourbook.core.security import hash_password, verify_password
from tourbook.models.user import User

logger = logging.getLogger(__name__)


def register_user(db: Session, name: str | None, email: str | None, phone: str | None, password: str | None) -> User:
    if not (name and email and phone and password):
        raise MissingField()
    email_l = email.strip().lower()

    exists = db.query(User.id).filter(User.email == email_l).first()
    if exists:
        raise DuplicateEmail()

    u = User(
        id=str(uuid.uuid4()),
        full_name=name.strip(),
        email=email_l,
        phone=phone.strip(),
        password_hash=hash_password(password),
        role="user",
    )
    db.add(u)
    db.commit()
    logger.info("Registered user %s", u.id)
    return u


def authenticate(db: Session, email: str, password: str) -> User:
    user = db.query(User).filter(User.email == (email or "").strip().lower()).first()
    if not user or not verify_password(password or "", user.password_hash):
        logger.warning("Failed login attempt")
        raise Unauthorized("Invalid email or password.")
    return user
