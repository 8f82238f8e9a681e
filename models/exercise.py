"""
models/exercise.py - Catálogo de ejercicios
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from config.database import Base

if TYPE_CHECKING:
    from models.muscle_group import GrupoMuscular
    from models.routine_exercise import RutinaEjercicio


class Ejercicio(Base):
    __tablename__ = "ejercicios"

    id_ejercicio: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nombre: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    descripcion: Mapped[str | None] = mapped_column(Text, nullable=True)
    grupo_muscular_id: Mapped[int] = mapped_column(
        ForeignKey("grupos_musculares.id_grupo_muscular", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    grupo_muscular: Mapped["GrupoMuscular"] = relationship(back_populates="ejercicios")

    # Un ejercicio usado en alguna rutina no se borra: lo impide la FK
    rutina_ejercicios: Mapped[list["RutinaEjercicio"]] = relationship(
        back_populates="ejercicio",
        passive_deletes="all",
    )
