# schemas/__init__.py
from .user import UsuarioCreate, UsuarioOut
from .auth import LoginIn, MeOut
from .muscle_group import GrupoMuscularIn, GrupoMuscularOut, GrupoMuscularDetail
from .exercise import EjercicioIn, EjercicioBasico, EjercicioOut
from .routine import RutinaIn, RutinaDuplicarIn, RutinaOut
from .routine_exercise import RutinaEjercicioCreate, RutinaEjercicioUpdate, RutinaEjercicioOut
from .calculator import CalculoPesoOut

__all__ = [
    "UsuarioCreate",
    "UsuarioOut",
    "LoginIn",
    "MeOut",
    "GrupoMuscularIn",
    "GrupoMuscularOut",
    "GrupoMuscularDetail",
    "EjercicioIn",
    "EjercicioBasico",
    "EjercicioOut",
    "RutinaIn",
    "RutinaDuplicarIn",
    "RutinaOut",
    "RutinaEjercicioCreate",
    "RutinaEjercicioUpdate",
    "RutinaEjercicioOut",
    "CalculoPesoOut",
]
