# schemas/muscle_group.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GrupoMuscularIn(BaseModel):
    nombre: Optional[str] = None


class GrupoMuscularOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id_grupo_muscular: int
    nombre: str


class EjercicioDelGrupo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id_ejercicio: int
    nombre: str
    descripcion: Optional[str] = None
    grupo_muscular_id: int = Field(serialization_alias="grupoMuscularId")


class GrupoMuscularDetail(GrupoMuscularOut):
    ejercicios: List[EjercicioDelGrupo] = Field(default_factory=list)
