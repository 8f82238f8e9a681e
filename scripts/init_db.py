# scripts/init_db.py
"""
Script para inicializar la base de datos con todos los modelos.

Uso:
    python scripts/init_db.py create
    python scripts/init_db.py drop [--yes]
    python scripts/init_db.py create-user --nombre admin --password secreto
"""

import argparse
import logging
import sys
from pathlib import Path

# Agregar el directorio padre al path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.database import Base, SessionLocal, engine  # noqa: E402
from config.settings import LOG_LEVEL  # noqa: E402

# Importar los modelos para que se registren en Base.metadata
import models  # noqa: E402,F401
from schemas.user import UsuarioCreate  # noqa: E402
from services import user_service  # noqa: E402
from utils.errors import AppError  # noqa: E402

logger = logging.getLogger("init_db")


def init_db() -> None:
    """Crea todas las tablas en la base de datos"""
    logger.info("Creando tablas en la base de datos...")
    Base.metadata.create_all(bind=engine)
    for table_name in sorted(Base.metadata.tables.keys()):
        logger.info("  - %s", table_name)


def drop_db(confirmar: bool = False) -> None:
    """Elimina todas las tablas (SOLO PARA DESARROLLO)"""
    if not confirmar:
        respuesta = input("¿Seguro que deseas eliminar todas las tablas? (s/n): ")
        if respuesta.strip().lower() != "s":
            logger.info("Operación cancelada")
            return
    Base.metadata.drop_all(bind=engine)
    logger.info("Tablas eliminadas")


def create_user(nombre: str, password: str) -> int:
    db = SessionLocal()
    try:
        u = user_service.create_user(db, UsuarioCreate(nombre=nombre, password=password))
    except AppError as e:
        logger.error("No se pudo crear el usuario: %s", e.detail)
        return 1
    finally:
        db.close()
    logger.info("Usuario %s creado (id %s)", u.nombre, u.id_usuario)
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Gestión de base de datos")
    sub = parser.add_subparsers(dest="action", required=True)

    sub.add_parser("create", help="Crea las tablas")
    drop = sub.add_parser("drop", help="Elimina las tablas")
    drop.add_argument("--yes", action="store_true", help="No pedir confirmación")
    user = sub.add_parser("create-user", help="Crea un usuario")
    user.add_argument("--nombre", required=True)
    user.add_argument("--password", required=True)

    args = parser.parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(message)s")

    if args.action == "create":
        init_db()
    elif args.action == "drop":
        drop_db(args.yes)
    elif args.action == "create-user":
        return create_user(args.nombre, args.password)
    return 0


if __name__ == "__main__":
    sys.exit(main())
