# routers/ejercicios.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from schemas.exercise import EjercicioIn, EjercicioOut
from services import exercise_service
from utils.dependencies import get_db

router = APIRouter()


@router.get("", response_model=List[EjercicioOut])
def listar_ejercicios(db: Session = Depends(get_db)):
    """Lista todos los ejercicios con su grupo muscular, por nombre."""
    return exercise_service.list_exercises(db)


@router.post("", response_model=EjercicioOut, status_code=status.HTTP_201_CREATED)
def crear_ejercicio(payload: EjercicioIn, db: Session = Depends(get_db)):
    return exercise_service.create_exercise(db, payload)


@router.get("/{id_ejercicio}", response_model=EjercicioOut)
def obtener_ejercicio(id_ejercicio: int, db: Session = Depends(get_db)):
    return exercise_service.get_exercise(db, id_ejercicio)


@router.put("/{id_ejercicio}", response_model=EjercicioOut)
def actualizar_ejercicio(id_ejercicio: int, payload: EjercicioIn, db: Session = Depends(get_db)):
    return exercise_service.update_exercise(db, id_ejercicio, payload)


@router.delete("/{id_ejercicio}")
def eliminar_ejercicio(id_ejercicio: int, db: Session = Depends(get_db)):
    exercise_service.delete_exercise(db, id_ejercicio)
    return {"message": "Ejercicio eliminado correctamente"}
