# services/exercise_service.py
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from models.exercise import Ejercicio
from models.muscle_group import GrupoMuscular
from schemas.exercise import EjercicioIn
from utils.errors import ConflictError, NotFoundError, ValidationError, translate_integrity_error

NO_ENCONTRADO = "Ejercicio no encontrado"
GRUPO_NO_ENCONTRADO = "Grupo muscular no encontrado"
EN_USO = "No se puede eliminar el ejercicio porque está asignado a una rutina"


def _campos(data: EjercicioIn) -> tuple[str, int]:
    nombre = (data.nombre or "").strip()
    if not nombre or not data.grupo_muscular_id:
        raise ValidationError("El nombre y grupo muscular son obligatorios")
    return nombre, data.grupo_muscular_id


def _verificar_grupo(db: Session, grupo_id: int) -> None:
    if db.get(GrupoMuscular, grupo_id) is None:
        raise NotFoundError(GRUPO_NO_ENCONTRADO)


def _commit(db: Session, e: Ejercicio) -> Ejercicio:
    try:
        db.commit()
    except IntegrityError as exc:
        # El grupo pudo borrarse entre la verificación y la escritura
        db.rollback()
        err = translate_integrity_error(exc, foreign_key=NotFoundError(GRUPO_NO_ENCONTRADO))
        if err is None:
            raise
        raise err from exc
    id_ejercicio = e.id_ejercicio
    # recarga grupo_muscular si cambió la FK
    db.expire(e)
    return get_exercise(db, id_ejercicio)


def list_exercises(db: Session) -> list[Ejercicio]:
    stmt = (
        select(Ejercicio)
        .options(joinedload(Ejercicio.grupo_muscular))
        .order_by(Ejercicio.nombre.asc())
    )
    return list(db.execute(stmt).scalars())


def get_exercise(db: Session, id_ejercicio: int) -> Ejercicio:
    stmt = (
        select(Ejercicio)
        .options(joinedload(Ejercicio.grupo_muscular))
        .where(Ejercicio.id_ejercicio == id_ejercicio)
    )
    e = db.execute(stmt).scalar_one_or_none()
    if not e:
        raise NotFoundError(NO_ENCONTRADO)
    return e


def create_exercise(db: Session, data: EjercicioIn) -> Ejercicio:
    nombre, grupo_id = _campos(data)
    _verificar_grupo(db, grupo_id)
    e = Ejercicio(nombre=nombre, descripcion=data.descripcion or None, grupo_muscular_id=grupo_id)
    db.add(e)
    return _commit(db, e)


def update_exercise(db: Session, id_ejercicio: int, data: EjercicioIn) -> Ejercicio:
    nombre, grupo_id = _campos(data)
    e = get_exercise(db, id_ejercicio)
    _verificar_grupo(db, grupo_id)
    e.nombre = nombre
    e.descripcion = data.descripcion or None
    e.grupo_muscular_id = grupo_id
    return _commit(db, e)


def delete_exercise(db: Session, id_ejercicio: int) -> None:
    e = get_exercise(db, id_ejercicio)
    db.delete(e)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        err = translate_integrity_error(exc, foreign_key=ConflictError(EN_USO))
        if err is None:
            raise
        raise err from exc
