# routers/grupos_musculares.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from schemas.muscle_group import GrupoMuscularDetail, GrupoMuscularIn, GrupoMuscularOut
from services import muscle_group_service
from utils.dependencies import get_db

router = APIRouter()


@router.get("", response_model=List[GrupoMuscularOut])
def listar_grupos(db: Session = Depends(get_db)):
    return muscle_group_service.list_grupos(db)


@router.post("", response_model=GrupoMuscularOut, status_code=status.HTTP_201_CREATED)
def crear_grupo(body: GrupoMuscularIn, db: Session = Depends(get_db)):
    return muscle_group_service.create_grupo(db, body)


@router.get("/{id_grupo}", response_model=GrupoMuscularDetail)
def obtener_grupo(id_grupo: int, db: Session = Depends(get_db)):
    return muscle_group_service.get_grupo(db, id_grupo, con_ejercicios=True)


@router.put("/{id_grupo}", response_model=GrupoMuscularOut)
def actualizar_grupo(id_grupo: int, body: GrupoMuscularIn, db: Session = Depends(get_db)):
    return muscle_group_service.update_grupo(db, id_grupo, body)


@router.delete("/{id_grupo}")
def eliminar_grupo(id_grupo: int, db: Session = Depends(get_db)):
    muscle_group_service.delete_grupo(db, id_grupo)
    return {"message": "Grupo muscular eliminado correctamente"}
