from fastapi import FastAPI, Depends, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.orm import Session
from datetime import datetime, timezone
import logging

# -------------------------------------------------------
# ⚙️ Core Imports
# -------------------------------------------------------
from .core.config import settings
from .core.logging import setup_logging
from .core.db import Base, engine, get_db, db_check
from .models.patient import Patient  # noqa: F401  (registers the table)

# -------------------------------------------------------
# 🧩 Routers
# -------------------------------------------------------
from .routers import patients

setup_logging()
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


class UnicodeJSONResponse(JSONResponse):
    """JSON body in UTF-8 with non-ASCII characters kept as-is."""
    media_type = "application/json; charset=utf-8"


# -------------------------------------------------------
# 🚀 FastAPI Initialization
# -------------------------------------------------------
# Only the routes below are served; no docs, no slash redirects.
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=VERSION,
    description="Cadastro de Pacientes – formulário, validação e gravação",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    redirect_slashes=False,
    default_response_class=UnicodeJSONResponse,
)

# -------------------------------------------------------
# 🏁 Startup Events
# -------------------------------------------------------
@app.on_event("startup")
def on_startup():
    """Create the patients table if the database is reachable."""
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("✅ Database models created.")
    except Exception as e:
        logger.warning("⚠️ Database init skipped: %s", e)

# -------------------------------------------------------
# 🚫 Unknown routes → plain-text 404
# -------------------------------------------------------
@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in (404, 405):
        return PlainTextResponse("Not Found", status_code=404)
    return await http_exception_handler(request, exc)

# -------------------------------------------------------
# ❤️ Health Checks
# -------------------------------------------------------
def health_status():
    return {
        "status": "ok",
        "service": settings.PROJECT_NAME,
        "version": VERSION,
    }

@app.get("/health", tags=["Health"])
def health():
    ts = datetime.now(timezone.utc).replace(microsecond=0).isoformat()
    return {**health_status(), "ts": ts}

@app.get("/db-check", tags=["Health"])
def health_db(db: Session = Depends(get_db)):
    result, error = db_check(db)
    if error:
        return UnicodeJSONResponse({"db": "error", "message": error}, status_code=500)
    return {"db": "ok", "result": result}

# -------------------------------------------------------
# 🔗 Router Registration
# -------------------------------------------------------
app.include_router(patients.router)
