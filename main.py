# main.py

import datetime
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config.settings import APP_ENV, APP_NAME, APP_VERSION, CORS_ORIGINS, LOG_LEVEL
from routers import (
    auth_router,
    usuarios_router,
    grupos_musculares_router,
    ejercicios_router,
    rutinas_router,
    rutina_ejercicios_router,
    calculadora_router,
)
from utils.errors import AppError

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# ============================================================
# CONFIGURACIÓN
# ============================================================

app = FastAPI(
    title=APP_NAME,
    version=APP_VERSION,
    description="API para gestión de rutinas de gimnasio",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


# ============================================================
# MANEJO DE ERRORES
# ============================================================

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


def _mensaje_validacion(exc: RequestValidationError) -> str:
    for err in exc.errors():
        loc = tuple(err.get("loc") or ())
        if loc[:1] == ("path",):
            return "ID inválido"
        if loc[:2] == ("query", "rutinaId"):
            return "ID de rutina inválido"
    return "Datos inválidos"


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.debug("Request inválido %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": _mensaje_validacion(exc)})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Error no controlado en %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Error interno del servidor"})


# ============================================================
# INCLUIR ROUTERS
# ============================================================

app.include_router(auth_router, prefix="/api/auth", tags=["Auth"])
app.include_router(usuarios_router, prefix="/api/usuarios", tags=["Usuarios"])
app.include_router(grupos_musculares_router, prefix="/api/grupos-musculares", tags=["Grupos musculares"])
app.include_router(ejercicios_router, prefix="/api/ejercicios", tags=["Ejercicios"])
app.include_router(rutinas_router, prefix="/api/rutinas", tags=["Rutinas"])
app.include_router(rutina_ejercicios_router, prefix="/api/rutina-ejercicios", tags=["Rutina-Ejercicios"])
app.include_router(calculadora_router, prefix="/api/calculadora-peso", tags=["Calculadora"])

logger.info("%s %s iniciada (%s)", APP_NAME, APP_VERSION, APP_ENV)


# ============================================================
# RUTAS BÁSICAS
# ============================================================

@app.get("/")
def read_root():
    """Ruta raíz de la API"""
    return {
        "nombre": APP_NAME,
        "version": APP_VERSION,
        "documentacion": "/docs",
        "redoc": "/redoc",
    }


@app.get("/health")
def health_check():
    return {"status": "ok", "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat()}


# ============================================================
# EJECUCIÓN
# ============================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
