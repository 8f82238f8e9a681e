# services/routine_service.py - Servicio completo para rutinas

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload, selectinload

from models.exercise import Ejercicio
from models.routine import GeneroEnum, Rutina
from models.routine_exercise import RutinaEjercicio, ordenar
from schemas.routine import RutinaIn
from utils.dates import create_date_range, is_valid_date, to_storage, today_for_input
from utils.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

GENEROS = {g.value for g in GeneroEnum}
# Alias que envía la pantalla de selección de perfil
GENERO_ALIAS = {"male": "hombre", "female": "mujer"}

NO_ENCONTRADA = "Rutina no encontrada"
FECHA_INVALIDA = "Formato de fecha inválido"
GENERO_INVALIDO = "El género debe ser 'hombre' o 'mujer'"


def _carga_completa():
    """Ejercicios de la rutina con su ejercicio y grupo muscular."""
    return (
        selectinload(Rutina.ejercicios)
        .joinedload(RutinaEjercicio.ejercicio)
        .joinedload(Ejercicio.grupo_muscular)
    )


def _fecha(raw: Optional[str]) -> datetime:
    if not is_valid_date(raw):
        raise ValidationError(FECHA_INVALIDA)
    return to_storage(raw)


def _genero(raw: Optional[str]) -> GeneroEnum:
    if raw not in GENEROS:
        raise ValidationError(GENERO_INVALIDO)
    return GeneroEnum(raw)


class RutinaService:
    """Servicio para gestionar rutinas"""

    @staticmethod
    def listar_rutinas(
            db: Session,
            fecha: Optional[str] = None,
            genero: Optional[str] = None,
    ) -> List[Rutina]:
        """
        Lista rutinas, más recientes primero.

        Args:
            fecha: día a filtrar (se toma el día completo en APP_TIMEZONE)
            genero: coincidencia exacta con 'hombre' o 'mujer'
        """
        stmt = (
            select(Rutina)
            .options(_carga_completa())
            .order_by(Rutina.fecha.desc(), Rutina.id_rutina.desc())
            .execution_options(populate_existing=True)
        )

        if fecha:
            if not is_valid_date(fecha):
                raise ValidationError(FECHA_INVALIDA)
            rango = create_date_range(fecha)
            stmt = stmt.where(
                Rutina.fecha >= to_storage(rango.inicio),
                Rutina.fecha <= to_storage(rango.fin),
            )

        if genero:
            stmt = stmt.where(Rutina.genero == _genero(genero))

        return list(db.execute(stmt).scalars())

    @staticmethod
    def rutina_de_hoy(db: Session, genero: Optional[str]) -> Rutina:
        """Rutina del día para el género elegido (primera si hay varias)."""
        if not genero:
            raise ValidationError("El género es obligatorio")
        genero = GENERO_ALIAS.get(genero.strip().lower(), genero.strip().lower())
        rutinas = RutinaService.listar_rutinas(db, today_for_input(), genero)
        if not rutinas:
            raise NotFoundError("No hay rutina disponible para hoy")
        return rutinas[0]

    @staticmethod
    def obtener_rutina(db: Session, id_rutina: int) -> Rutina:
        """Obtiene una rutina por ID con sus ejercicios"""
        stmt = (
            select(Rutina)
            .options(_carga_completa())
            .where(Rutina.id_rutina == id_rutina)
            .execution_options(populate_existing=True)
        )
        rutina = db.execute(stmt).scalar_one_or_none()
        if not rutina:
            raise NotFoundError(NO_ENCONTRADA)
        return rutina

    @staticmethod
    def crear_rutina(db: Session, data: RutinaIn) -> Rutina:
        fecha, genero, descripcion = RutinaService._validar(data)
        rutina = Rutina(fecha=fecha, genero=genero, descripcion=descripcion)
        db.add(rutina)
        db.commit()
        logger.info("Rutina %s creada (%s, %s)", rutina.id_rutina, genero.value, fecha.isoformat())
        return RutinaService.obtener_rutina(db, rutina.id_rutina)

    @staticmethod
    def actualizar_rutina(db: Session, id_rutina: int, data: RutinaIn) -> Rutina:
        fecha, genero, descripcion = RutinaService._validar(data)
        rutina = RutinaService.obtener_rutina(db, id_rutina)
        rutina.fecha = fecha
        rutina.genero = genero
        rutina.descripcion = descripcion
        db.commit()
        return RutinaService.obtener_rutina(db, id_rutina)

    @staticmethod
    def eliminar_rutina(db: Session, id_rutina: int) -> None:
        """
        Elimina una rutina y todos sus ejercicios (cascada).
        """
        rutina = RutinaService.obtener_rutina(db, id_rutina)
        db.delete(rutina)
        db.commit()

    @staticmethod
    def duplicar_rutina(db: Session, id_rutina: int, fecha: Optional[str]) -> Rutina:
        """
        Copia una rutina (género, descripción y ejercicios) a otra fecha.

        La rutina nueva se confirma antes de copiar los ejercicios y cada copia
        se confirma por separado: si alguna falla, la rutina nueva queda con
        los ejercicios que sí se pudieron copiar.
        """
        if not fecha:
            raise ValidationError("La fecha es obligatoria")
        nueva_fecha = _fecha(fecha)

        original = RutinaService.obtener_rutina(db, id_rutina)
        copias = [
            (link.ejercicio_id, link.series, link.repeticiones, link.orden)
            for link in ordenar(list(original.ejercicios))
        ]

        nueva = Rutina(
            fecha=nueva_fecha,
            genero=original.genero,
            descripcion=original.descripcion,
        )
        db.add(nueva)
        db.commit()
        id_nueva = nueva.id_rutina

        copiados: set[int] = set()
        for ejercicio_id, series, repeticiones, orden in copias:
            if ejercicio_id in copiados:
                logger.warning(
                    "Rutina %s: ejercicio %s repetido, se omite la copia", id_nueva, ejercicio_id
                )
                continue
            db.add(RutinaEjercicio(
                rutina_id=id_nueva,
                ejercicio_id=ejercicio_id,
                series=series,
                repeticiones=repeticiones,
                orden=orden,
            ))
            try:
                db.commit()
            except IntegrityError as e:
                db.rollback()
                logger.warning(
                    "Rutina %s: no se pudo copiar el ejercicio %s: %s", id_nueva, ejercicio_id, e.orig
                )
                continue
            copiados.add(ejercicio_id)

        logger.info(
            "Rutina %s duplicada como %s (%d/%d ejercicios)",
            id_rutina, id_nueva, len(copiados), len(copias),
        )
        return RutinaService.obtener_rutina(db, id_nueva)

    @staticmethod
    def _validar(data: RutinaIn) -> tuple[datetime, GeneroEnum, Optional[str]]:
        if not data.fecha or not data.genero:
            raise ValidationError("La fecha y el género son obligatorios")
        genero = _genero(data.genero)
        fecha = _fecha(data.fecha)
        return fecha, genero, data.descripcion or None
