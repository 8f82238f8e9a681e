"""
models/routine_exercise.py - Relación entre rutinas y ejercicios
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from config.database import Base

if TYPE_CHECKING:
    from models.exercise import Ejercicio
    from models.routine import Rutina


class RutinaEjercicio(Base):
    __tablename__ = "rutina_ejercicios"
    __table_args__ = (
        UniqueConstraint("rutina_id", "ejercicio_id", name="uq_rutina_ejercicio"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    rutina_id: Mapped[int] = mapped_column(
        ForeignKey("rutinas.id_rutina", ondelete="CASCADE"), nullable=False, index=True
    )
    ejercicio_id: Mapped[int] = mapped_column(
        ForeignKey("ejercicios.id_ejercicio", ondelete="RESTRICT"), nullable=False, index=True
    )
    series: Mapped[int | None] = mapped_column(Integer, nullable=True)
    repeticiones: Mapped[int | None] = mapped_column(Integer, nullable=True)
    orden: Mapped[int | None] = mapped_column(Integer, nullable=True)

    rutina: Mapped["Rutina"] = relationship(back_populates="ejercicios")
    ejercicio: Mapped["Ejercicio"] = relationship(back_populates="rutina_ejercicios")

    def sort_key(self) -> tuple[bool, int, int]:
        # orden nulo va después de cualquier valor explícito
        return (self.orden is None, self.orden or 0, self.id or 0)

    @classmethod
    def orden_sql(cls):
        """Cláusulas ORDER BY con nulos al final (portable a MySQL y SQLite)."""
        return (cls.orden.is_(None), cls.orden.asc(), cls.id.asc())


def ordenar(links: list[RutinaEjercicio]) -> list[RutinaEjercicio]:
    return sorted(links, key=lambda link: link.sort_key())
