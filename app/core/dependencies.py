# app/core/dependencies.py
from typing import Generator, Optional
from fastapi import Header
from sqlalchemy.orm import Session
from app.db.session import SessionLocal
from app.core.clock import Clock, SystemClock


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_clock() -> Clock:
    return SystemClock()


def get_actor_id(x_user_id: Optional[str] = Header(None)) -> Optional[str]:
    # authentication is handled upstream; we only record who acted
    return x_user_id
