# models/routine.py
from __future__ import annotations

import enum
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum as SAEnum, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from config.database import Base

if TYPE_CHECKING:
    from models.routine_exercise import RutinaEjercicio


class GeneroEnum(str, enum.Enum):
    hombre = "hombre"
    mujer = "mujer"


class Rutina(Base):
    __tablename__ = "rutinas"

    id_rutina: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Instante UTC sin tzinfo; se interpreta como día en APP_TIMEZONE (utils.dates)
    fecha: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    genero: Mapped[GeneroEnum] = mapped_column(
        SAEnum(GeneroEnum, name="generoenum", native_enum=False, validate_strings=True),
        nullable=False,
        index=True,
    )
    descripcion: Mapped[str | None] = mapped_column(Text, nullable=True)

    ejercicios: Mapped[list["RutinaEjercicio"]] = relationship(
        back_populates="rutina",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
