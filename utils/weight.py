# utils/weight.py
"""Calculadora de peso a partir del 1RM (aritmética pura, sin persistencia)."""
from __future__ import annotations

import math
from typing import Literal

Redondeo = Literal["0.5", "1", "none"]

PORCENTAJES_RAPIDOS = (50, 60, 70, 80, 90)


def calcular_peso(one_rep_max: float | None, porcentaje: float, redondeo: Redondeo = "none") -> float | None:
    """
    Peso estimado = 1RM * porcentaje / 100.

    Devuelve None si el 1RM no es un número positivo. ``redondeo`` ajusta al
    0.5 más cercano, al entero más cercano o deja el valor tal cual.
    """
    if one_rep_max is None or one_rep_max <= 0:
        return None
    if not 0 <= porcentaje <= 100:
        raise ValueError("El porcentaje debe estar entre 0 y 100")

    value = one_rep_max * porcentaje / 100
    if redondeo == "0.5":
        value = _round_half_up(value * 2) / 2
    elif redondeo == "1":
        value = float(_round_half_up(value))
    return value


def _round_half_up(x: float) -> int:
    # .5 siempre hacia arriba, sin redondeo bancario
    return math.floor(x + 0.5)
