# routers/rutinas.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from schemas.routine import RutinaDuplicarIn, RutinaIn, RutinaOut
from services.routine_service import RutinaService
from utils.dependencies import get_db

router = APIRouter()


@router.get("", response_model=List[RutinaOut])
def listar_rutinas(
    fecha: Optional[str] = Query(None, description="Día YYYY-MM-DD"),
    genero: Optional[str] = Query(None, description="hombre | mujer"),
    db: Session = Depends(get_db),
):
    return RutinaService.listar_rutinas(db, fecha, genero)


@router.post("", response_model=RutinaOut, status_code=status.HTTP_201_CREATED)
def crear_rutina(payload: RutinaIn, db: Session = Depends(get_db)):
    return RutinaService.crear_rutina(db, payload)


# Debe ir antes de "/{id_rutina}"
@router.get("/hoy", response_model=RutinaOut)
def rutina_de_hoy(
    genero: Optional[str] = Query(None, description="hombre | mujer | male | female"),
    db: Session = Depends(get_db),
):
    """Rutina del día en la zona horaria configurada."""
    return RutinaService.rutina_de_hoy(db, genero)


@router.get("/{id_rutina}", response_model=RutinaOut)
def obtener_rutina(id_rutina: int, db: Session = Depends(get_db)):
    return RutinaService.obtener_rutina(db, id_rutina)


@router.put("/{id_rutina}", response_model=RutinaOut)
def actualizar_rutina(id_rutina: int, payload: RutinaIn, db: Session = Depends(get_db)):
    return RutinaService.actualizar_rutina(db, id_rutina, payload)


@router.post("/{id_rutina}", response_model=RutinaOut, status_code=status.HTTP_201_CREATED)
def duplicar_rutina(id_rutina: int, payload: RutinaDuplicarIn, db: Session = Depends(get_db)):
    """Duplica la rutina (con sus ejercicios) en la fecha indicada."""
    return RutinaService.duplicar_rutina(db, id_rutina, payload.fecha)


@router.delete("/{id_rutina}")
def eliminar_rutina(id_rutina: int, db: Session = Depends(get_db)):
    RutinaService.eliminar_rutina(db, id_rutina)
    return {"message": "Rutina eliminada correctamente"}
