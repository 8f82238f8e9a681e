# schemas/auth.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from schemas.user import UsuarioOut


class LoginIn(BaseModel):
    nombre: Optional[str] = None
    password: Optional[str] = None


class MeOut(BaseModel):
    authenticated: bool
    usuario: Optional[UsuarioOut] = None
