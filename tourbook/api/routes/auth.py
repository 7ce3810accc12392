import logging
from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session
from tourbook.db.session import get_db
from tourbook.schemas.auth import LoginRequest, RegisterRequest
from tourbook.core.config import settings
from tourbook.core.security import create_session_token
from tourbook.services.auth_service import authenticate, register_user
from tourbook.api.deps import Identity, get_identity

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def set_session_cookie(response, token: str) -> None:
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        token,
        max_age=settings.SESSION_TTL_MINUTES * 60,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )


def clear_session_cookie(response) -> None:
    response.delete_cookie(settings.SESSION_COOKIE_NAME)


@router.get("/login")
def login_form(identity: Identity | None = Depends(get_identity)):
    return {"authenticated": identity is not None}


@router.post("/login")
def login(body: LoginRequest, db: Session = Depends(get_db)):
    user = authenticate(db, body.email, body.password)
    response = RedirectResponse(url="/", status_code=303)
    set_session_cookie(response, create_session_token(user.id, user.email, user.role))
    return response


@router.post("/register")
def register(body: RegisterRequest, db: Session = Depends(get_db)):
    register_user(db, body.name, body.email, body.phone, body.password)
    return RedirectResponse(url="/login", status_code=303)


@router.get("/logout")
def logout():
    response = RedirectResponse(url="/login", status_code=303)
    clear_session_cookie(response)
    return response
