# models/__init__.py
from .user import Usuario
from .muscle_group import GrupoMuscular
from .exercise import Ejercicio
from .routine import Rutina, GeneroEnum
from .routine_exercise import RutinaEjercicio

__all__ = [
    "Usuario",
    "GrupoMuscular",
    "Ejercicio",
    "Rutina",
    "GeneroEnum",
    "RutinaEjercicio",
]
