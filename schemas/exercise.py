# schemas/exercise.py
from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from schemas.muscle_group import GrupoMuscularOut


class EjercicioIn(BaseModel):
    nombre: Optional[str] = None
    descripcion: Optional[str] = None
    grupo_muscular_id: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("grupoMuscularId", "grupo_muscular_id"),
    )


class EjercicioBasico(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id_ejercicio: int
    nombre: str
    descripcion: Optional[str] = None
    grupo_muscular_id: int = Field(serialization_alias="grupoMuscularId")


class EjercicioOut(EjercicioBasico):
    grupo_muscular: GrupoMuscularOut = Field(serialization_alias="grupoMuscular")
