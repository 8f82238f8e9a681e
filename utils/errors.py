# utils/errors.py
"""
Errores de dominio. Los servicios los lanzan y main.py los convierte en
respuestas JSON ``{"detail": ...}`` con el status correspondiente.
"""
from __future__ import annotations

from sqlalchemy.exc import IntegrityError

# Códigos MySQL: 1062 clave duplicada, 1451 fila padre referenciada, 1452 FK inexistente
_MYSQL_DUPLICATE = {1062}
_MYSQL_FOREIGN_KEY = {1451, 1452}


class AppError(Exception):
    status_code = 500
    default_detail = "Error interno del servidor"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ValidationError(AppError):
    status_code = 400
    default_detail = "Datos inválidos"


class UnauthorizedError(AppError):
    status_code = 401
    default_detail = "No autenticado"


class NotFoundError(AppError):
    status_code = 404
    default_detail = "Recurso no encontrado"


class ConflictError(AppError):
    status_code = 409
    default_detail = "Conflicto de claves únicas"


class ConfigurationError(AppError):
    status_code = 500
    default_detail = "Configuración inválida"


def integrity_kind(exc: IntegrityError) -> str | None:
    """Devuelve "unique", "foreign_key" o None según el error del driver."""
    orig = getattr(exc, "orig", None)
    args = getattr(orig, "args", ()) or ()
    code = args[0] if args and isinstance(args[0], int) else None
    if code in _MYSQL_DUPLICATE:
        return "unique"
    if code in _MYSQL_FOREIGN_KEY:
        return "foreign_key"

    msg = str(orig if orig is not None else exc).lower()
    if "unique constraint failed" in msg or "duplicate entry" in msg:
        return "unique"
    if "foreign key constraint" in msg:
        return "foreign_key"
    return None


def translate_integrity_error(
    exc: IntegrityError,
    *,
    duplicate: str | None = None,
    foreign_key: AppError | None = None,
) -> AppError | None:
    """
    Traduce una violación de restricción en un AppError concreto.
    Devuelve None si no se reconoce: el llamador debe relanzar el original.
    """
    kind = integrity_kind(exc)
    if kind == "unique" and duplicate:
        return ConflictError(duplicate)
    if kind == "foreign_key" and foreign_key is not None:
        return foreign_key
    return None


__all__ = [
    "AppError",
    "ValidationError",
    "UnauthorizedError",
    "NotFoundError",
    "ConflictError",
    "ConfigurationError",
    "integrity_kind",
    "translate_integrity_error",
]
