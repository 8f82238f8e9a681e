from __future__ import annotations

from typing import Generator

from sqlalchemy.orm import Session

from config.database import SessionLocal


# -------------------------------
# Sesión de base de datos (una por request)
# -------------------------------
def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
