# services/user_service.py
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models.user import Usuario
from schemas.user import UsuarioCreate
from utils.errors import ConflictError, NotFoundError, ValidationError, translate_integrity_error
from utils.security import hash_password

NOMBRE_DUPLICADO = "Ya existe un usuario con ese nombre"
NO_ENCONTRADO = "Usuario no encontrado"


def _validar(data: UsuarioCreate) -> tuple[str, str]:
    nombre = (data.nombre or "").strip()
    if not nombre or not data.password:
        raise ValidationError("El nombre y contraseña son obligatorios")
    return nombre, data.password


def _commit(db: Session, u: Usuario) -> Usuario:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        err = translate_integrity_error(e, duplicate=NOMBRE_DUPLICADO)
        if err is None:
            raise
        raise err from e
    db.refresh(u)
    return u


def get_by_nombre(db: Session, nombre: str) -> Usuario | None:
    return db.execute(select(Usuario).where(Usuario.nombre == nombre)).scalar_one_or_none()


def get_user(db: Session, id_usuario: int) -> Usuario:
    u = db.get(Usuario, id_usuario)
    if not u:
        raise NotFoundError(NO_ENCONTRADO)
    return u


def list_users(db: Session) -> list[Usuario]:
    return list(db.execute(select(Usuario).order_by(Usuario.nombre.asc())).scalars())


def create_user(db: Session, data: UsuarioCreate) -> Usuario:
    nombre, password = _validar(data)
    if get_by_nombre(db, nombre):
        raise ConflictError(NOMBRE_DUPLICADO)
    u = Usuario(nombre=nombre, password=hash_password(password))
    db.add(u)
    return _commit(db, u)


def update_user(db: Session, id_usuario: int, data: UsuarioCreate) -> Usuario:
    nombre, password = _validar(data)
    u = get_user(db, id_usuario)
    otro = get_by_nombre(db, nombre)
    if otro and otro.id_usuario != u.id_usuario:
        raise ConflictError(NOMBRE_DUPLICADO)
    u.nombre = nombre
    u.password = hash_password(password)
    return _commit(db, u)


def delete_user(db: Session, id_usuario: int) -> None:
    u = get_user(db, id_usuario)
    db.delete(u)
    db.commit()
