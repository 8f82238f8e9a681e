# schemas/user.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class UsuarioCreate(BaseModel):
    # Opcionales a propósito: los faltantes se reportan con 400 desde el servicio
    nombre: Optional[str] = None
    password: Optional[str] = None


class UsuarioOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id_usuario: int
    nombre: str
