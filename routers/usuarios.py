# routers/usuarios.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from schemas.user import UsuarioCreate, UsuarioOut
from services import user_service
from utils.dependencies import get_db

router = APIRouter()


@router.get("", response_model=List[UsuarioOut])
def listar_usuarios(db: Session = Depends(get_db)):
    return user_service.list_users(db)


@router.post("", response_model=UsuarioOut, status_code=status.HTTP_201_CREATED)
def crear_usuario(body: UsuarioCreate, db: Session = Depends(get_db)):
    """Registro: guarda el nombre y el hash de la contraseña."""
    return user_service.create_user(db, body)


@router.get("/{id_usuario}", response_model=UsuarioOut)
def obtener_usuario(id_usuario: int, db: Session = Depends(get_db)):
    return user_service.get_user(db, id_usuario)


@router.put("/{id_usuario}", response_model=UsuarioOut)
def actualizar_usuario(id_usuario: int, body: UsuarioCreate, db: Session = Depends(get_db)):
    return user_service.update_user(db, id_usuario, body)


@router.delete("/{id_usuario}")
def eliminar_usuario(id_usuario: int, db: Session = Depends(get_db)):
    user_service.delete_user(db, id_usuario)
    return {"message": "Usuario eliminado correctamente"}
