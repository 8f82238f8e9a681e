# utils/security.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import bcrypt
from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTError
from passlib.context import CryptContext
from passlib.exc import UnknownHashError

from config.settings import JWT_ALG, JWT_EXP_DAYS
from utils.errors import UnauthorizedError

# ✅ Sin dependencias nativas, sin límite de 72 bytes
pwd_ctx = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

# Hashes heredados (bcryptjs) de la versión anterior del sistema
_BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


def hash_password(password: str) -> str:
    return pwd_ctx.hash(password)


def is_legacy_hash(hashed: str | None) -> bool:
    return bool(hashed) and hashed.startswith(_BCRYPT_PREFIXES)


def verify_password(plain: str, hashed: str | None) -> bool:
    if not hashed:
        return False
    if is_legacy_hash(hashed):
        try:
            return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            return False
    try:
        return pwd_ctx.verify(plain, hashed)
    except (UnknownHashError, ValueError):
        return False


def needs_update(hashed: str) -> bool:
    if is_legacy_hash(hashed):
        return True
    try:
        return pwd_ctx.needs_update(hashed)
    except UnknownHashError:
        return True


def create_token(data: Dict[str, Any], secret: str, expires_days: int = JWT_EXP_DAYS) -> str:
    """
    Crea un JWT firmado. 'data' debe incluir al menos 'sub' (id de usuario).
    """
    now = datetime.now(timezone.utc)

    # jose exige 'sub' como string
    if "sub" in data:
        data = {**data, "sub": str(data["sub"])}

    payload: Dict[str, Any] = {
        **data,
        "iat": now,
        "exp": now + timedelta(days=expires_days),
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALG)


def decode_token(token: str, secret: str) -> Dict[str, Any]:
    """
    Valida firma y expiración. Lanza UnauthorizedError si es inválido/expirado.
    """
    try:
        return jwt.decode(token, secret, algorithms=[JWT_ALG])
    except ExpiredSignatureError:
        raise UnauthorizedError("El token ha expirado")
    except JWTError:
        raise UnauthorizedError("Token inválido")


__all__ = [
    "hash_password",
    "verify_password",
    "needs_update",
    "is_legacy_hash",
    "create_token",
    "decode_token",
]
