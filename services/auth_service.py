# services/auth_service.py
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from config.settings import get_jwt_secret
from models.user import Usuario
from services import user_service
from utils.errors import ConfigurationError, UnauthorizedError, ValidationError
from utils.security import create_token, decode_token, hash_password, needs_update, verify_password

logger = logging.getLogger(__name__)

CREDENCIALES_INCORRECTAS = "Credenciales incorrectas"


def _require_secret() -> str:
    secret = get_jwt_secret()
    if not secret:
        logger.error("JWT_SECRET no está definido")
        raise ConfigurationError("Configuración inválida")
    return secret


def login(db: Session, nombre: str | None, password: str | None) -> tuple[Usuario, str]:
    """
    Valida credenciales y devuelve (usuario, token).
    Usuario inexistente y contraseña incorrecta dan el mismo error.
    """
    if not nombre or not password:
        raise ValidationError("El nombre y contraseña son obligatorios")

    user = user_service.get_by_nombre(db, nombre)
    if not user or not verify_password(password, user.password):
        raise UnauthorizedError(CREDENCIALES_INCORRECTAS)

    secret = _require_secret()

    # Migración "al vuelo" de hashes heredados
    if needs_update(user.password):
        user.password = hash_password(password)
        db.add(user)
        db.commit()
        logger.info("Hash de contraseña actualizado para usuario %s", user.id_usuario)

    token = create_token({"sub": user.id_usuario, "nombre": user.nombre}, secret)
    return user, token


def usuario_desde_token(db: Session, token: str | None) -> Usuario:
    if not token:
        raise UnauthorizedError("No autenticado")

    secret = _require_secret()
    payload = decode_token(token, secret)

    try:
        user_id = int(payload.get("sub"))
    except (ValueError, TypeError):
        raise UnauthorizedError("Token inválido (sub)")

    user = db.get(Usuario, user_id)
    if not user:
        raise UnauthorizedError("Usuario no encontrado")
    return user
