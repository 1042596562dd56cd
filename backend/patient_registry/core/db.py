from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from typing import Any, Dict, Optional, Tuple
from .config import settings
import logging
import os

logger = logging.getLogger(__name__)

SQLALCHEMY_DATABASE_URL = settings.DATABASE_URL

# ✅ Detect database type
if SQLALCHEMY_DATABASE_URL.startswith("sqlite"):
    # Local dev fallback (auto-create folder)
    db_path = make_url(SQLALCHEMY_DATABASE_URL).database or ""
    if os.path.dirname(db_path):
        os.makedirs(os.path.dirname(db_path), exist_ok=True)
    logger.info("[DB CONFIG] Using SQLite → %s", db_path or ":memory:")
else:
    logger.info("[DB CONFIG] Using Postgres → %s", make_url(SQLALCHEMY_DATABASE_URL).render_as_string(hide_password=True))

# ✅ Engine setup
engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    pool_pre_ping=True,
    connect_args={"check_same_thread": False}
    if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def db_check(db: Session) -> Tuple[Optional[Dict[str, Any]], Optional[str]]:
    """Run ``SELECT 1`` on the session; return ``(row, None)`` or ``(None, error)``."""
    try:
        row = db.execute(text("SELECT 1 AS ok")).mappings().first()
        return dict(row), None
    except Exception as e:
        logger.warning("[DB CHECK] failed: %s", e)
        return None, str(e)
