# services/muscle_group_service.py
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from models.muscle_group import GrupoMuscular
from schemas.muscle_group import GrupoMuscularIn
from utils.errors import ConflictError, NotFoundError, ValidationError, translate_integrity_error

NOMBRE_DUPLICADO = "Ya existe un grupo muscular con ese nombre"
NO_ENCONTRADO = "Grupo muscular no encontrado"
EN_USO = "No se puede eliminar el grupo muscular porque tiene ejercicios asociados"


def _nombre(data: GrupoMuscularIn) -> str:
    nombre = (data.nombre or "").strip()
    if not nombre:
        raise ValidationError("El nombre es obligatorio")
    return nombre


def _get_by_nombre(db: Session, nombre: str) -> GrupoMuscular | None:
    return db.execute(
        select(GrupoMuscular).where(GrupoMuscular.nombre == nombre)
    ).scalar_one_or_none()


def _commit(db: Session, grupo: GrupoMuscular) -> GrupoMuscular:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        err = translate_integrity_error(e, duplicate=NOMBRE_DUPLICADO)
        if err is None:
            raise
        raise err from e
    db.refresh(grupo)
    return grupo


def list_grupos(db: Session) -> list[GrupoMuscular]:
    return list(db.execute(select(GrupoMuscular).order_by(GrupoMuscular.nombre.asc())).scalars())


def get_grupo(db: Session, id_grupo: int, con_ejercicios: bool = False) -> GrupoMuscular:
    stmt = select(GrupoMuscular).where(GrupoMuscular.id_grupo_muscular == id_grupo)
    if con_ejercicios:
        stmt = stmt.options(selectinload(GrupoMuscular.ejercicios))
    grupo = db.execute(stmt).scalar_one_or_none()
    if not grupo:
        raise NotFoundError(NO_ENCONTRADO)
    return grupo


def create_grupo(db: Session, data: GrupoMuscularIn) -> GrupoMuscular:
    nombre = _nombre(data)
    if _get_by_nombre(db, nombre):
        raise ConflictError(NOMBRE_DUPLICADO)
    grupo = GrupoMuscular(nombre=nombre)
    db.add(grupo)
    return _commit(db, grupo)


def update_grupo(db: Session, id_grupo: int, data: GrupoMuscularIn) -> GrupoMuscular:
    nombre = _nombre(data)
    grupo = get_grupo(db, id_grupo)
    otro = _get_by_nombre(db, nombre)
    if otro and otro.id_grupo_muscular != grupo.id_grupo_muscular:
        raise ConflictError(NOMBRE_DUPLICADO)
    grupo.nombre = nombre
    return _commit(db, grupo)


def delete_grupo(db: Session, id_grupo: int) -> None:
    """La FK de ejercicios rechaza el borrado si el grupo sigue en uso."""
    grupo = get_grupo(db, id_grupo)
    db.delete(grupo)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        err = translate_integrity_error(e, foreign_key=ConflictError(EN_USO))
        if err is None:
            raise
        raise err from e
