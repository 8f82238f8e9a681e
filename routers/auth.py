# routers/auth.py
from typing import Optional

from fastapi import APIRouter, Cookie, Depends, Response
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from config.settings import COOKIE_NAME, JWT_EXP_DAYS, is_development
from schemas.auth import LoginIn, MeOut
from schemas.user import UsuarioOut
from services import auth_service
from utils.dependencies import get_db
from utils.errors import UnauthorizedError

router = APIRouter()

COOKIE_MAX_AGE = 60 * 60 * 24 * JWT_EXP_DAYS


def _set_session_cookie(response: Response, value: str, max_age: int) -> None:
    response.set_cookie(
        key=COOKIE_NAME,
        value=value,
        max_age=max_age,
        path="/",
        httponly=True,
        samesite="lax",
        secure=not is_development(),
    )


@router.post("/login", response_model=UsuarioOut)
def login(body: LoginIn, response: Response, db: Session = Depends(get_db)):
    """Login con nombre y contraseña; deja el JWT en la cookie de sesión."""
    user, token = auth_service.login(db, body.nombre, body.password)
    _set_session_cookie(response, token, COOKIE_MAX_AGE)
    return user


@router.delete("/login")
def logout(response: Response):
    _set_session_cookie(response, "", 0)
    return {"message": "Sesión cerrada"}


@router.get("/me", response_model=MeOut)
def me(
    db: Session = Depends(get_db),
    token: Optional[str] = Cookie(None, alias=COOKIE_NAME),
):
    try:
        user = auth_service.usuario_desde_token(db, token)
    except UnauthorizedError:
        return JSONResponse({"authenticated": False}, status_code=401)
    return {"authenticated": True, "usuario": user}
