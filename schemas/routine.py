# schemas/routine.py
from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from models.routine import GeneroEnum
from models.routine_exercise import ordenar
from schemas.exercise import EjercicioOut
from utils.dates import to_iso_string


# ============================================================
# SCHEMAS DE ENTRADA (Requests)
# ============================================================

class RutinaIn(BaseModel):
    """Crear o actualizar rutina. La validación de negocio va en el servicio."""
    fecha: Optional[str] = None
    genero: Optional[str] = None
    descripcion: Optional[str] = None


class RutinaDuplicarIn(BaseModel):
    fecha: Optional[str] = None


# ============================================================
# SCHEMAS DE SALIDA (Responses)
# ============================================================

class EjercicioEnRutina(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    rutina_id: int = Field(serialization_alias="rutinaId")
    ejercicio_id: int = Field(serialization_alias="ejercicioId")
    series: Optional[int] = None
    repeticiones: Optional[int] = None
    orden: Optional[int] = None
    ejercicio: EjercicioOut


class RutinaOut(BaseModel):
    """Rutina con sus ejercicios ordenados por 'orden' (nulos al final)."""
    model_config = ConfigDict(from_attributes=True)

    id_rutina: int
    fecha: datetime
    genero: GeneroEnum
    descripcion: Optional[str] = None
    ejercicios: List[EjercicioEnRutina] = Field(default_factory=list)

    @field_validator("ejercicios", mode="before")
    @classmethod
    def _ordenar(cls, value: Any) -> Any:
        if value and all(hasattr(v, "sort_key") for v in value):
            return ordenar(list(value))
        return value

    @field_serializer("fecha")
    def _fecha_iso(self, value: datetime) -> str:
        return to_iso_string(value)
