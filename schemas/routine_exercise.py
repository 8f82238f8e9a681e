# schemas/routine_exercise.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_serializer

from models.routine import GeneroEnum
from schemas.exercise import EjercicioBasico
from utils.dates import to_iso_string


class RutinaEjercicioCreate(BaseModel):
    rutina_id: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("rutinaId", "rutina_id")
    )
    ejercicio_id: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("ejercicioId", "ejercicio_id")
    )
    series: Optional[int] = Field(default=None, ge=1)
    repeticiones: Optional[int] = Field(default=None, ge=1)
    orden: Optional[int] = None


class RutinaEjercicioUpdate(BaseModel):
    """PUT reemplaza los tres campos: ausente o null se guarda como null."""
    series: Optional[int] = Field(default=None, ge=1)
    repeticiones: Optional[int] = Field(default=None, ge=1)
    orden: Optional[int] = None


class RutinaResumen(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id_rutina: int
    fecha: datetime
    genero: GeneroEnum
    descripcion: Optional[str] = None

    @field_serializer("fecha")
    def _fecha_iso(self, value: datetime) -> str:
        return to_iso_string(value)


class RutinaEjercicioOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    rutina_id: int = Field(serialization_alias="rutinaId")
    ejercicio_id: int = Field(serialization_alias="ejercicioId")
    series: Optional[int] = None
    repeticiones: Optional[int] = None
    orden: Optional[int] = None
    ejercicio: EjercicioBasico
    rutina: RutinaResumen
