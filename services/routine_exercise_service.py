# services/routine_exercise_service.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from models.exercise import Ejercicio
from models.routine import Rutina
from models.routine_exercise import RutinaEjercicio
from schemas.routine_exercise import RutinaEjercicioCreate, RutinaEjercicioUpdate
from utils.errors import ConflictError, NotFoundError, ValidationError, translate_integrity_error

NO_ENCONTRADO = "Ejercicio de rutina no encontrado"
DUPLICADO = "La rutina ya contiene este ejercicio"


def _query():
    return (
        select(RutinaEjercicio)
        .options(joinedload(RutinaEjercicio.ejercicio), joinedload(RutinaEjercicio.rutina))
        .execution_options(populate_existing=True)
    )


def _existe_vinculo(db: Session, rutina_id: int, ejercicio_id: int) -> bool:
    return db.execute(
        select(RutinaEjercicio.id).where(
            RutinaEjercicio.rutina_id == rutina_id,
            RutinaEjercicio.ejercicio_id == ejercicio_id,
        )
    ).first() is not None


def list_rutina_ejercicios(db: Session, rutina_id: Optional[int] = None) -> list[RutinaEjercicio]:
    stmt = _query().order_by(*RutinaEjercicio.orden_sql())
    if rutina_id is not None:
        stmt = stmt.where(RutinaEjercicio.rutina_id == rutina_id)
    return list(db.execute(stmt).scalars())


def get_rutina_ejercicio(db: Session, id_: int) -> RutinaEjercicio:
    link = db.execute(_query().where(RutinaEjercicio.id == id_)).scalar_one_or_none()
    if not link:
        raise NotFoundError(NO_ENCONTRADO)
    return link


def create_rutina_ejercicio(db: Session, data: RutinaEjercicioCreate) -> RutinaEjercicio:
    if not data.rutina_id or not data.ejercicio_id:
        raise ValidationError("El ID de rutina y ejercicio son obligatorios")

    if db.get(Rutina, data.rutina_id) is None:
        raise NotFoundError("Rutina no encontrada")
    if db.get(Ejercicio, data.ejercicio_id) is None:
        raise NotFoundError("Ejercicio no encontrado")

    # Verificación previa; la restricción única de la BD es la garantía final
    if _existe_vinculo(db, data.rutina_id, data.ejercicio_id):
        raise ConflictError(DUPLICADO)

    link = RutinaEjercicio(
        rutina_id=data.rutina_id,
        ejercicio_id=data.ejercicio_id,
        series=data.series,
        repeticiones=data.repeticiones,
        orden=data.orden,
    )
    db.add(link)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        err = translate_integrity_error(
            e, duplicate=DUPLICADO, foreign_key=NotFoundError("Rutina o ejercicio no encontrado")
        )
        if err is None:
            raise
        raise err from e
    return get_rutina_ejercicio(db, link.id)


def update_rutina_ejercicio(db: Session, id_: int, data: RutinaEjercicioUpdate) -> RutinaEjercicio:
    link = get_rutina_ejercicio(db, id_)
    link.series = data.series
    link.repeticiones = data.repeticiones
    link.orden = data.orden
    db.commit()
    return get_rutina_ejercicio(db, id_)


def delete_rutina_ejercicio(db: Session, id_: int) -> None:
    link = get_rutina_ejercicio(db, id_)
    db.delete(link)
    db.commit()
