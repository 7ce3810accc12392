from dataclasses import dataclass
from fastapi import Depends
from fastapi.security import APIKeyCookie
from jose import JWTError
from tourbook.core.config import settings
from tourbook.core.errors import Forbidden, LoginRequired
from tourbook.core.security import decode_token

session_cookie = APIKeyCookie(name=settings.SESSION_COOKIE_NAME, auto_error=False)


@dataclass(frozen=True)
class Identity:
    id: str
    email: str
    role: str


def get_identity(token: str | None = Depends(session_cookie)) -> Identity | None:
    """Identity carried by the session cookie, or None. Never touches the database."""
    if not token:
        return None
    try:
        payload = decode_token(token)
    except JWTError:
        return None
    if payload.get("type") != "session" or not payload.get("sub"):
        return None
    return Identity(id=payload["sub"], email=payload.get("email", ""), role=payload.get("role", "user"))


def require_authenticated(identity: Identity | None = Depends(get_identity)) -> Identity:
    if identity is None:
        raise LoginRequired()
    return identity


def require_admin(identity: Identity = Depends(require_authenticated)) -> Identity:
    if identity.role != "admin":
        raise Forbidden("Access denied. Admin only.")
    return identity
