# routers/calculadora.py
from typing import Literal, Optional

from fastapi import APIRouter, Query

from schemas.calculator import CalculoPesoOut
from utils.errors import ValidationError
from utils.weight import PORCENTAJES_RAPIDOS, calcular_peso

router = APIRouter()


@router.get("", response_model=CalculoPesoOut)
def calcular(
    one_rm: Optional[float] = Query(None, description="Peso máximo (1RM) en kg"),
    porcentaje: float = Query(70, description="Porcentaje del 1RM (0-100)"),
    redondeo: Literal["0.5", "1", "none"] = Query("none"),
):
    """Estimación de peso a partir del 1RM. No guarda nada."""
    try:
        resultado = calcular_peso(one_rm, porcentaje, redondeo)
    except ValueError as e:
        raise ValidationError(str(e))
    return {
        "one_rm": one_rm,
        "porcentaje": porcentaje,
        "redondeo": redondeo,
        "resultado": resultado,
        "porcentajes_rapidos": list(PORCENTAJES_RAPIDOS),
    }
