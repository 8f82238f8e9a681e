# routers/rutina_ejercicios.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from schemas.routine_exercise import (
    RutinaEjercicioCreate,
    RutinaEjercicioOut,
    RutinaEjercicioUpdate,
)
from services import routine_exercise_service as service
from utils.dependencies import get_db

router = APIRouter()


@router.get("", response_model=List[RutinaEjercicioOut])
def listar(
    rutina_id: Optional[int] = Query(None, alias="rutinaId"),
    db: Session = Depends(get_db),
):
    """Todos los ejercicios de rutina, o solo los de ``rutinaId``, por orden."""
    return service.list_rutina_ejercicios(db, rutina_id)


@router.post("", response_model=RutinaEjercicioOut, status_code=status.HTTP_201_CREATED)
def crear(body: RutinaEjercicioCreate, db: Session = Depends(get_db)):
    return service.create_rutina_ejercicio(db, body)


@router.get("/{id_rutina_ejercicio}", response_model=RutinaEjercicioOut)
def obtener(id_rutina_ejercicio: int, db: Session = Depends(get_db)):
    return service.get_rutina_ejercicio(db, id_rutina_ejercicio)


@router.put("/{id_rutina_ejercicio}", response_model=RutinaEjercicioOut)
def actualizar(id_rutina_ejercicio: int, body: RutinaEjercicioUpdate, db: Session = Depends(get_db)):
    return service.update_rutina_ejercicio(db, id_rutina_ejercicio, body)


@router.delete("/{id_rutina_ejercicio}")
def eliminar(id_rutina_ejercicio: int, db: Session = Depends(get_db)):
    service.delete_rutina_ejercicio(db, id_rutina_ejercicio)
    return {"message": "Ejercicio de rutina eliminado correctamente"}
