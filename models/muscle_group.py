# models/muscle_group.py
from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from config.database import Base

if TYPE_CHECKING:
    from models.exercise import Ejercicio


class GrupoMuscular(Base):
    __tablename__ = "grupos_musculares"

    id_grupo_muscular: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nombre: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)

    # passive_deletes="all": el ORM no toca los ejercicios, la FK de la BD decide
    ejercicios: Mapped[list["Ejercicio"]] = relationship(
        back_populates="grupo_muscular",
        passive_deletes="all",
        order_by="Ejercicio.nombre",
    )
