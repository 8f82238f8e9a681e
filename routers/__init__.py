# routers/__init__.py

from .auth import router as auth_router
from .usuarios import router as usuarios_router
from .grupos_musculares import router as grupos_musculares_router
from .ejercicios import router as ejercicios_router
from .rutinas import router as rutinas_router
from .rutina_ejercicios import router as rutina_ejercicios_router
from .calculadora import router as calculadora_router

__all__ = [
    "auth_router",
    "usuarios_router",
    "grupos_musculares_router",
    "ejercicios_router",
    "rutinas_router",
    "rutina_ejercicios_router",
    "calculadora_router",
]
