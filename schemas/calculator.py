# schemas/calculator.py
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel


class CalculoPesoOut(BaseModel):
    one_rm: Optional[float] = None
    porcentaje: float
    redondeo: Literal["0.5", "1", "none"]
    resultado: Optional[float] = None
    porcentajes_rapidos: List[int]
